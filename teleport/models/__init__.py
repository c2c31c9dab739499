"""Entities held by the registry: libraries, targets, mappings, generators, publishers."""

from teleport.models.generator import Generator
from teleport.models.library import ElementsLibrary, GuiPackage
from teleport.models.mapping import ElementsLibraryTargetMapping
from teleport.models.publisher import Publisher
from teleport.models.target import Target

__all__ = [
    "ElementsLibrary",
    "ElementsLibraryTargetMapping",
    "Generator",
    "GuiPackage",
    "Publisher",
    "Target",
]
