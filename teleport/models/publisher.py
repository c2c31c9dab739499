"""Publishers — deploy generated output. Independent of targets and libraries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Publisher:
    name: str
    options: dict[str, Any] = field(default_factory=dict)

    type = "publisher"

    def publish(self, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError(f"Publisher {self.name} does not implement publish()")
