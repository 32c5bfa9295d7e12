import os
from dataclasses import dataclass

from fontawesome_gtk.models.glyph import Variant

FONT_FILES = {
    Variant.BRANDS: "fa-brands-400.ttf",
    Variant.REGULAR: "fa-regular-400.ttf",
    Variant.SOLID: "fa-solid-900.ttf",
}

DEFAULT_FONT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "fonts"))


@dataclass(frozen=True)
class FontPaths:
    """Locations of the three Font Awesome font files."""

    brands: str
    regular: str
    solid: str

    @classmethod
    def from_directory(cls, directory: str) -> "FontPaths":
        return cls(
            brands=os.path.join(directory, FONT_FILES[Variant.BRANDS]),
            regular=os.path.join(directory, FONT_FILES[Variant.REGULAR]),
            solid=os.path.join(directory, FONT_FILES[Variant.SOLID]),
        )

    @classmethod
    def default(cls) -> "FontPaths":
        return cls.from_directory(DEFAULT_FONT_DIR)

    def for_variant(self, variant: Variant) -> str:
        if variant is Variant.BRANDS:
            return self.brands
        if variant is Variant.REGULAR:
            return self.regular
        return self.solid
