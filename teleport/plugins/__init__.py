"""Plugin payloads and the sources they are loaded from."""

from teleport.plugins.payloads import (
    GeneratorPlugin,
    GuiPlugin,
    LibraryPlugin,
    MappingPlugin,
    Plugin,
    PluginType,
    PublisherPlugin,
    parse_plugin,
)
from teleport.plugins.sources import fetch_plugin_url, is_url, read_plugin_file

__all__ = [
    "GeneratorPlugin",
    "GuiPlugin",
    "LibraryPlugin",
    "MappingPlugin",
    "Plugin",
    "PluginType",
    "PublisherPlugin",
    "fetch_plugin_url",
    "is_url",
    "parse_plugin",
    "read_plugin_file",
]
