"""The registry that loads plugins and keeps libraries, targets, mappings,
generators and publishers consistent with each other.

Plugins are applied one at a time, in the order they are given. Later
plugins can rely on entities registered by earlier ones: a mapping needs its
library to be loaded already, and creates its target on demand.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import httpx

from teleport.errors import (
    LibraryNotLoadedError,
    NoSuchTargetError,
    TargetAlreadyRegisteredError,
    UnrecognizedPluginTypeError,
)
from teleport.models import (
    ElementsLibrary,
    ElementsLibraryTargetMapping,
    Generator,
    GuiPackage,
    Publisher,
    Target,
)
from teleport.plugins.payloads import (
    GeneratorPlugin,
    GuiPlugin,
    LibraryPlugin,
    MappingPlugin,
    PublisherPlugin,
    parse_plugin,
)
from teleport.plugins.sources import fetch_plugin_url, is_url, read_plugin_file
from teleport.transformers import Transformer, default_transformers

logger = logging.getLogger(__name__)


class Teleport:
    """Name-keyed registry of everything the code generation pipeline needs."""

    def __init__(self, http_client: httpx.AsyncClient | None = None):
        self.libraries: dict[str, ElementsLibrary] = {}
        self.mappings: dict[str, ElementsLibraryTargetMapping] = {}
        self.targets: dict[str, Target] = {}
        self.generators: dict[str, Generator] = {}
        self.publishers: dict[str, Publisher] = {}
        self.transformers: dict[str, Transformer] = default_transformers()
        self.http_client = http_client

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def use(self, plugin: Any) -> Teleport:
        """Load a payload, a file path, a URL, or a sequence of those.

        Sequences are applied strictly in order; each entry (including any
        download and any nested sequence) completes before the next starts.
        """
        if isinstance(plugin, Path):
            self.use_plugin(await asyncio.to_thread(read_plugin_file, plugin))
        elif isinstance(plugin, str):
            if is_url(plugin):
                self.use_plugin(await fetch_plugin_url(plugin, client=self.http_client))
            else:
                self.use_plugin(await asyncio.to_thread(read_plugin_file, plugin))
        elif isinstance(plugin, (Mapping, Generator, Publisher)):
            self.use_plugin(plugin)
        elif isinstance(plugin, Sequence):
            for item in plugin:
                await self.use(item)
        else:
            raise UnrecognizedPluginTypeError(plugin)
        return self

    def use_sync(self, plugin: Any) -> Teleport:
        """Blocking variant of ``use`` for callers without an event loop."""
        return asyncio.run(self.use(plugin))

    def use_plugin(self, payload: Any) -> Teleport:
        """Classify one decoded payload and register it."""
        plugin = parse_plugin(payload)

        if isinstance(plugin, LibraryPlugin):
            return self.use_library(plugin)
        if isinstance(plugin, MappingPlugin):
            return self.use_mapping(plugin)
        if isinstance(plugin, GeneratorPlugin):
            return self.use_generator(plugin.generator)
        if isinstance(plugin, PublisherPlugin):
            return self.use_publisher(plugin.publisher)
        if isinstance(plugin, GuiPlugin):
            return self.use_gui(plugin)

        raise UnrecognizedPluginTypeError(payload)

    # ------------------------------------------------------------------
    # Libraries
    # ------------------------------------------------------------------

    def use_library(self, definition: LibraryPlugin | Mapping[str, Any]) -> Teleport:
        if isinstance(definition, Mapping):
            definition = _parse_as(definition, "library", LibraryPlugin)

        library = ElementsLibrary(
            name=definition.name,
            version=definition.version,
            description=definition.description,
            elements=definition.elements,
        )
        if library.name in self.libraries:
            logger.debug("Library %s replaced", library.name)
        self.libraries[library.name] = library
        logger.debug("Registered library %s", library.name)
        return self

    def library(self, name: str) -> ElementsLibrary:
        try:
            return self.libraries[name]
        except KeyError:
            raise LibraryNotLoadedError(name) from None

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------

    def use_target(self, name: str) -> Teleport:
        if name in self.targets:
            raise TargetAlreadyRegisteredError(name)

        self.targets[name] = Target(name)
        logger.debug("Registered target %s", name)
        return self

    def target(self, name: str) -> Target:
        try:
            return self.targets[name]
        except KeyError:
            raise NoSuchTargetError(name) from None

    def _ensure_target(self, name: str) -> Target:
        if name not in self.targets:
            logger.info("Auto-creating target %s", name)
            self.use_target(name)
        return self.targets[name]

    # ------------------------------------------------------------------
    # Mappings
    # ------------------------------------------------------------------

    def use_mapping(self, definition: MappingPlugin | Mapping[str, Any]) -> Teleport:
        """Register a mapping and link it to its target and library.

        The library must already be loaded. The target is created if this is
        the first mapping or generator that mentions it. The library is
        resolved before anything is stored, so a failure leaves the registry
        exactly as it was.
        """
        if isinstance(definition, Mapping):
            definition = _parse_as(definition, "mapping", MappingPlugin)

        mapping = ElementsLibraryTargetMapping(
            name=definition.name,
            library=definition.library,
            target=definition.target,
            maps=definition.maps,
            extends=definition.extends,
            registry=self,
        )
        library = self.library(mapping.library)

        self.mappings[mapping.name] = mapping
        self._ensure_target(mapping.target).use_mapping(mapping)
        library.use_mapping(mapping)
        logger.debug(
            "Registered mapping %s (%s -> %s)", mapping.name, mapping.library, mapping.target
        )
        return self

    def mapping(self, name: str) -> ElementsLibraryTargetMapping | None:
        return self.mappings.get(name)

    def map(self, target_name: str, source: str, element_type: str) -> Any | None:
        """Resolve an element of library ``source`` for ``target_name``.

        Returns None when the target does not exist, so callers can check unguarded.
        """
        target = self.targets.get(target_name)
        if target is None:
            return None
        return target.map(source, element_type)

    # ------------------------------------------------------------------
    # Generators
    # ------------------------------------------------------------------

    def use_generator(self, generator: Generator) -> Teleport:
        target = self._ensure_target(generator.target_name)
        generator.set_target(target)
        target.set_generator(generator)

        self.generators[generator.name] = generator
        logger.debug("Registered generator %s for target %s", generator.name, target.name)
        return self

    def generator(self, name: str) -> Generator | None:
        return self.generators.get(name)

    # ------------------------------------------------------------------
    # Publishers
    # ------------------------------------------------------------------

    def use_publisher(self, publisher: Publisher) -> Teleport:
        self.publishers[publisher.name] = publisher
        logger.debug("Registered publisher %s", publisher.name)
        return self

    def publisher(self, name: str) -> Publisher | None:
        return self.publishers.get(name)

    # ------------------------------------------------------------------
    # GUI metadata
    # ------------------------------------------------------------------

    def use_gui(self, data: GuiPlugin | Mapping[str, Any]) -> Teleport:
        if isinstance(data, Mapping):
            data = _parse_as(data, "gui", GuiPlugin)

        library = self.library(data.library)
        library.use_gui(
            GuiPackage(
                name=data.name or data.library,
                library=data.library,
                elements=data.elements,
                data=data.data,
            )
        )
        return self

    # ------------------------------------------------------------------
    # Transformers
    # ------------------------------------------------------------------

    def register_transformer(self, name: str, fn: Transformer) -> Teleport:
        self.transformers[name] = fn
        return self


def _parse_as(definition: Mapping[str, Any], kind: str, expected: type) -> Any:
    """Parse a raw definition handed straight to a ``use_*`` method.

    The ``type`` key may be omitted since the method already implies it.
    """
    plugin = parse_plugin({"type": kind, **definition})
    if not isinstance(plugin, expected):
        raise UnrecognizedPluginTypeError(definition)
    return plugin
