"""Teleport — composition engine for design-to-code pipelines.

Loads library, mapping, generator, publisher and GUI plugins and wires them
into a registry that generators and publishers query by name.
"""

__version__ = "0.1.0"

from teleport.registry.teleport import Teleport  # noqa: E402

__all__ = ["Teleport", "__version__"]
