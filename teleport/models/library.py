"""Elements libraries — named collections of UI element schemas."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from teleport.models.mapping import ElementsLibraryTargetMapping

logger = logging.getLogger(__name__)


@dataclass
class GuiPackage:
    """GUI metadata attached to a library (editor palettes, previews, icons)."""

    name: str
    library: str
    elements: dict[str, Any] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class ElementsLibrary:
    """A named set of element schemas that mappings can use as a source.

    Element schemas are opaque: the library stores whatever the plugin
    declared under ``elements`` and hands it back unchanged.
    """

    name: str
    version: str = ""
    description: str = ""
    elements: dict[str, Any] = field(default_factory=dict)
    mappings: dict[str, ElementsLibraryTargetMapping] = field(default_factory=dict)
    guis: dict[str, GuiPackage] = field(default_factory=dict)

    def element(self, element_type: str) -> Any | None:
        return self.elements.get(element_type)

    def use_mapping(self, mapping: ElementsLibraryTargetMapping) -> None:
        self.mappings[mapping.name] = mapping
        logger.debug("Library %s adopted mapping %s", self.name, mapping.name)

    def use_gui(self, gui: GuiPackage) -> None:
        """Attach GUI metadata, keyed by the GUI package name."""
        self.guis[gui.name] = gui
        logger.debug("Library %s attached gui %s", self.name, gui.name)

    def gui(self, name: str = "") -> GuiPackage | None:
        """Return the GUI package called ``name`` (default: the library's own)."""
        return self.guis.get(name or self.name)
