from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple, Union

import plotly.express as px

DEFAULT_SCHEME = "D3"  # d3 category10


@dataclass(frozen=True)
class NamedScheme:
    """A Plotly qualitative scheme, referenced by name (e.g. "D3", "Set1", "Dark2")."""
    name: str = DEFAULT_SCHEME


@dataclass(frozen=True)
class CustomPalette:
    """Caller-supplied list of colors."""
    colors: Tuple[str, ...]

    def __init__(self, colors: Sequence[str]):
        object.__setattr__(self, "colors", tuple(colors))


Palette = Union[NamedScheme, CustomPalette]


def available_schemes() -> list[str]:
    return sorted(
        name
        for name, value in vars(px.colors.qualitative).items()
        if not name.startswith("_") and isinstance(value, list)
    )


class ColorMapper:
    """
    Pure ``cluster index -> color`` function.

    Indices wrap around the palette, so the same index always maps to the
    same color for a given palette.
    """

    def __init__(self, colors: Sequence[str], field: str = "cluster"):
        if not colors:
            raise ValueError("Palette must contain at least one color")
        self.colors: Tuple[str, ...] = tuple(colors)
        self.field = field

    def __call__(self, index: Any) -> str:
        return self.colors[int(index) % len(self.colors)]

    def for_record(self, record: Mapping[str, Any]) -> str:
        """Per-point color function handed to chart views."""
        return self(int(record[self.field]))


def resolve_palette(palette: Palette | str | Sequence[str] | None = None) -> ColorMapper:
    """
    Resolve a palette into a :class:`ColorMapper`.

    Accepts the tagged variants as well as a bare scheme name or a list of
    colors, which is what the JSON config and Dash controls hand over.

    Raises:
        ValueError: unknown scheme name or empty custom palette
    """
    if palette is None:
        palette = NamedScheme()
    elif isinstance(palette, str):
        palette = NamedScheme(palette)
    elif not isinstance(palette, (NamedScheme, CustomPalette)):
        palette = CustomPalette(palette)

    if isinstance(palette, CustomPalette):
        return ColorMapper(palette.colors)

    colors = getattr(px.colors.qualitative, palette.name, None)
    if not isinstance(colors, list):
        raise ValueError(
            f"Unknown color scheme '{palette.name}'. "
            f"Available schemes: {available_schemes()}"
        )
    return ColorMapper(colors)
