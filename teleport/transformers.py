"""Property transformers shared by mappings and generators.

The registry only stores these; generators look them up by name when they
convert element properties for their target.
"""

from __future__ import annotations

import re
from typing import Any, Callable

Transformer = Callable[..., Any]


def camel_to_kebab(value: str) -> str:
    """``backgroundColor`` -> ``background-color``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "-", value).lower()


def kebab_to_camel(value: str) -> str:
    """``background-color`` -> ``backgroundColor``."""
    head, *rest = value.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def style_to_css(style: dict[str, Any]) -> str:
    """Render a style mapping as an inline CSS declaration list."""
    return "; ".join(f"{camel_to_kebab(k)}: {v}" for k, v in style.items())


def default_transformers() -> dict[str, Transformer]:
    return {
        "camelToKebab": camel_to_kebab,
        "kebabToCamel": kebab_to_camel,
        "styleToCss": style_to_css,
    }
