"""Colour themes consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping

from modal_engine.errors import ThemeError


@dataclass(frozen=True, slots=True)
class Colour:
    r: int
    g: int
    b: int

    @classmethod
    def parse(cls, value: str) -> "Colour":
        """Parse ``"#rrggbb"`` or ``"rrggbb"``."""

        digits = value[1:] if value.startswith("#") else value
        if len(digits) < 6:
            raise ThemeError(f"Colour {value!r} needs six hex digits")
        try:
            return cls(
                int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
            )
        except ValueError as exc:
            raise ThemeError(f"Colour {value!r} is not hexadecimal") from exc

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True, slots=True)
class ColourTheme:
    keyword: Colour
    ident: Colour
    lit: Colour
    delim: Colour
    types: Colour
    extra: Colour
    background: Colour
    function: Colour
    comment: Colour

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "ColourTheme":
        values: dict[str, Colour] = {}
        for item in fields(cls):
            raw = data.get(item.name)
            if not isinstance(raw, str):
                raise ThemeError(f"Theme colour '{item.name}' is missing")
            values[item.name] = Colour.parse(raw)
        return cls(**values)


DEFAULT_THEME_COLOURS: Mapping[str, str] = {
    "keyword": "#c586c0",
    "ident": "#9cdcfe",
    "lit": "#ce9178",
    "delim": "#d4d4d4",
    "types": "#4ec9b0",
    "extra": "#d7ba7d",
    "background": "#1e1e1e",
    "function": "#dcdcaa",
    "comment": "#6a9955",
}

DEFAULT_THEME = ColourTheme.from_mapping(DEFAULT_THEME_COLOURS)


__all__ = ["Colour", "ColourTheme", "DEFAULT_THEME", "DEFAULT_THEME_COLOURS"]
