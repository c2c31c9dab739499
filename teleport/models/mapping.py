"""Mappings from a library's elements to one target's representation rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from teleport.registry.teleport import Teleport

logger = logging.getLogger(__name__)


@dataclass
class ElementsLibraryTargetMapping:
    """Binds the elements of ``library`` to rules for ``target``.

    ``maps`` is keyed by element type; each value is the opaque rule a
    generator consumes. ``extends`` names another mapping to fall back on
    for element types this one does not cover. The mapping keeps a handle
    on its registry so that peers are resolved when they are needed, not
    when the mapping is declared.
    """

    name: str
    library: str
    target: str
    maps: dict[str, Any] = field(default_factory=dict)
    extends: str = ""
    registry: Teleport | None = field(default=None, repr=False, compare=False)

    def map(self, source: str, element_type: str) -> Any | None:
        """Return the rule for ``element_type`` of library ``source``, if any."""
        seen: set[str] = set()
        mapping: ElementsLibraryTargetMapping | None = self
        while mapping is not None and mapping.name not in seen:
            seen.add(mapping.name)
            if source == mapping.library and element_type in mapping.maps:
                return mapping.maps[element_type]
            mapping = mapping.parent()
        return None

    def parent(self) -> ElementsLibraryTargetMapping | None:
        """The mapping named by ``extends``, or None if it isn't registered."""
        if not self.extends or self.registry is None:
            return None
        parent = self.registry.mapping(self.extends)
        if parent is None:
            logger.debug("Mapping %s extends unknown mapping %s", self.name, self.extends)
        return parent
