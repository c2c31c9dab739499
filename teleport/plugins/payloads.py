"""Plugin payloads — the tagged declarations a registry consumes.

A payload is either a mapping decoded from JSON/YAML (``{"type": "library",
...}``) or an already-built ``Generator``/``Publisher`` object. ``parse_plugin``
turns either form into exactly one of the five variants below; anything else
is rejected with ``UnrecognizedPluginTypeError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from teleport.errors import InvalidPluginError, UnrecognizedPluginTypeError
from teleport.models import Generator, Publisher


class PluginType(Enum):
    """The ``type`` discriminator of a plugin payload."""

    LIBRARY = "library"
    MAPPING = "mapping"
    GENERATOR = "generator"
    PUBLISHER = "publisher"
    GUI = "gui"


@dataclass
class LibraryPlugin:
    name: str
    version: str = ""
    description: str = ""
    elements: dict[str, Any] = field(default_factory=dict)


@dataclass
class MappingPlugin:
    name: str
    library: str
    target: str
    maps: dict[str, Any] = field(default_factory=dict)
    extends: str = ""


@dataclass
class GeneratorPlugin:
    generator: Generator


@dataclass
class PublisherPlugin:
    publisher: Publisher


@dataclass
class GuiPlugin:
    library: str
    name: str = ""
    elements: dict[str, Any] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)


Plugin = Union[LibraryPlugin, MappingPlugin, GeneratorPlugin, PublisherPlugin, GuiPlugin]

_KNOWN_KEYS = {"type", "name", "library", "elements"}


def plugin_type(payload: Any) -> PluginType:
    """Read the ``type`` discriminator from a mapping or an object."""
    if isinstance(payload, Mapping):
        raw = payload.get("type")
    else:
        raw = getattr(payload, "type", None)

    try:
        return PluginType(raw)
    except ValueError:
        raise UnrecognizedPluginTypeError(payload) from None


def parse_plugin(payload: Any) -> Plugin:
    """Classify a payload and build the matching variant."""
    kind = plugin_type(payload)

    if isinstance(payload, Generator) and kind is PluginType.GENERATOR:
        return GeneratorPlugin(generator=payload)
    if isinstance(payload, Publisher) and kind is PluginType.PUBLISHER:
        return PublisherPlugin(publisher=payload)

    # Anything that is not a built entity must be plain data.
    if not isinstance(payload, Mapping):
        raise UnrecognizedPluginTypeError(payload)

    if kind is PluginType.GENERATOR:
        return GeneratorPlugin(
            generator=Generator(
                name=_require(payload, "name"),
                target_name=payload.get("targetName") or _require(payload, "target"),
                options=dict(payload.get("options", {})),
            )
        )

    if kind is PluginType.PUBLISHER:
        return PublisherPlugin(
            publisher=Publisher(
                name=_require(payload, "name"),
                options=dict(payload.get("options", {})),
            )
        )

    if kind is PluginType.LIBRARY:
        return LibraryPlugin(
            name=_require(payload, "name"),
            version=str(payload.get("version", "")),
            description=payload.get("description", ""),
            elements=dict(payload.get("elements") or {}),
        )

    if kind is PluginType.MAPPING:
        return MappingPlugin(
            name=_require(payload, "name"),
            library=_require(payload, "library"),
            target=_require(payload, "target"),
            maps=dict(payload.get("maps") or {}),
            extends=payload.get("extends") or "",
        )

    library = _require(payload, "library")
    return GuiPlugin(
        library=library,
        name=payload.get("name") or library,
        elements=dict(payload.get("elements") or {}),
        data={k: v for k, v in payload.items() if k not in _KNOWN_KEYS},
    )


def _require(payload: Mapping[str, Any], key: str) -> Any:
    value = payload.get(key)
    if not value:
        raise InvalidPluginError(payload, key)
    return value
