"""Targets — output platforms that own mappings and a generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from teleport.models.generator import Generator
    from teleport.models.mapping import ElementsLibraryTargetMapping

logger = logging.getLogger(__name__)


@dataclass
class Target:
    """A named output platform (a framework, a markup dialect, ...)."""

    name: str
    mappings: dict[str, ElementsLibraryTargetMapping] = field(default_factory=dict)
    generator: Generator | None = field(default=None, repr=False)

    def use_mapping(self, mapping: ElementsLibraryTargetMapping) -> None:
        self.mappings[mapping.name] = mapping
        logger.debug("Target %s adopted mapping %s", self.name, mapping.name)

    def set_generator(self, generator: Generator) -> None:
        if self.generator is not None and self.generator is not generator:
            logger.warning(
                "Target %s: generator %s replaced by %s",
                self.name,
                self.generator.name,
                generator.name,
            )
        self.generator = generator

    def map(self, source: str, element_type: str) -> Any | None:
        """Resolve an element through this target's mappings, first hit wins."""
        for mapping in self.mappings.values():
            rule = mapping.map(source, element_type)
            if rule is not None:
                return rule
        return None
