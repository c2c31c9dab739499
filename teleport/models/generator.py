"""Generators — emit output artifacts for exactly one target."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from teleport.models.target import Target


@dataclass
class Generator:
    """Base class for code generators.

    Subclasses implement ``generate``. Plugins loaded from JSON/YAML create
    plain instances that only carry the declaration; calling ``generate`` on
    those raises ``NotImplementedError``.
    """

    name: str
    target_name: str
    options: dict[str, Any] = field(default_factory=dict)
    target: Target | None = field(default=None, repr=False, compare=False)

    type = "generator"

    def set_target(self, target: Target) -> None:
        self.target = target

    def generate(self, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError(f"Generator {self.name} does not implement generate()")
