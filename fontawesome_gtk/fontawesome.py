from typing import Optional

from fontawesome_gtk.models import FontPaths, GlyphRegistry, Variant, rich_text
from fontawesome_gtk.rendering import Colour, GlyphIcon, PangoFontLoader, render_icon


class FontAwesome:
    """Font Awesome glyphs for GTK applications.

    Build one per application, normally with :meth:`create`, and share it
    with whatever needs icons or tagged text.
    """

    def __init__(self, registry: GlyphRegistry):
        self.registry = registry

    @classmethod
    def create(cls, font_dir: Optional[str] = None, scan_fonts: bool = True) -> "FontAwesome":
        fonts = FontPaths.from_directory(font_dir) if font_dir else FontPaths.default()
        registry = GlyphRegistry(PangoFontLoader(), fonts=fonts, scan_fonts=scan_fonts)
        return cls(registry)

    def brands_name(self) -> str:
        return self.registry.family_name(Variant.BRANDS)

    def regular_name(self) -> str:
        return self.registry.family_name(Variant.REGULAR)

    def solid_name(self) -> str:
        return self.registry.family_name(Variant.SOLID)

    def rich_text(self, text: str) -> str:
        """Return ``text`` as Pango markup with ``[fab|far|fas name]`` tags
        replaced by the glyphs they name."""
        return rich_text(text, self.registry)

    def icon(self, glyph_name: str, point_size: int, colour: Colour,
             variant: Optional[Variant] = None) -> GlyphIcon:
        return render_icon(self.registry, glyph_name, point_size, colour, variant=variant)
