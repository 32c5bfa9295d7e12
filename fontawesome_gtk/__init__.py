from .models import (
    FontFace,
    FontLoadError,
    FontPaths,
    GlyphEntry,
    GlyphNotFoundError,
    GlyphRegistry,
    Variant,
    rich_text,
)

__all__ = [
    "FontFace",
    "FontLoadError",
    "FontPaths",
    "GlyphEntry",
    "GlyphNotFoundError",
    "GlyphRegistry",
    "Variant",
    "rich_text",
]
