from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional


class Variant(Enum):
    BRANDS = "fab"
    REGULAR = "far"
    SOLID = "fas"

    @property
    def selector(self) -> str:
        return self.value

    @classmethod
    def from_selector(cls, token: str) -> Optional["Variant"]:
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass(frozen=True)
class FontFace:
    family: str
    weight: int = 400


@dataclass(frozen=True)
class GlyphEntry:
    """A named glyph and the font variants that carry it.

    ``variant`` is the glyph's home face: brand glyphs live in the brands
    font, everything else is drawn from the solid font unless a caller
    explicitly asks for another face listed in ``variants``.
    """

    name: str
    code_point: int
    variant: Variant
    variants: FrozenSet[Variant] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.variants:
            object.__setattr__(self, "variants", frozenset({self.variant}))

    @property
    def char(self) -> str:
        return chr(self.code_point)

    def code_hex(self) -> str:
        return f"U+{self.code_point:04X}"

    def supports(self, variant: Variant) -> bool:
        return variant in self.variants
