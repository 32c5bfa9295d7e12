from .glyph import FontFace, GlyphEntry, Variant
from .config import FontPaths
from .font_utils import (
    read_font_face,
    resolve_font_file_for_family,
    read_glyph_names_from_font,
)
from .registry import FontLoadError, FontLoader, GlyphNotFoundError, GlyphRegistry
from .rich_text import rich_text

__all__ = [
    "FontFace",
    "GlyphEntry",
    "Variant",
    "FontPaths",
    "read_font_face",
    "resolve_font_file_for_family",
    "read_glyph_names_from_font",
    "FontLoadError",
    "FontLoader",
    "GlyphNotFoundError",
    "GlyphRegistry",
    "rich_text",
]
