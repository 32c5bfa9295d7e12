import logging
import math
import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

import cairo
import gi
gi.require_version("Gdk", "4.0")
gi.require_version("Pango", "1.0")
gi.require_version("PangoCairo", "1.0")
from gi.repository import Gdk, GLib, Pango, PangoCairo

from fontawesome_gtk.models import (
    FontFace,
    FontLoadError,
    GlyphRegistry,
    Variant,
    read_font_face,
    resolve_font_file_for_family,
)

LOGGER = logging.getLogger(__name__)

SCREEN_DPI = 96.0
POINTS_PER_INCH = 72.0
DEFAULT_SCALES = (1, 2)

# cairo ARGB32 is a native-endian premultiplied 32-bit word
_MEMORY_FORMAT = (
    Gdk.MemoryFormat.B8G8R8A8_PREMULTIPLIED
    if sys.byteorder == "little"
    else Gdk.MemoryFormat.A8R8G8B8_PREMULTIPLIED
)

Colour = Union[Gdk.RGBA, str]


class PangoFontLoader:
    """Registers font files with the default PangoCairo font map."""

    def __init__(self, font_map: Optional[Pango.FontMap] = None):
        self._font_map = font_map or PangoCairo.FontMap.get_default()
        self._faces: List[FontFace] = []

    def load_font(self, path: str) -> int:
        if not os.path.isfile(path):
            raise FontLoadError(f"font file not found: {path}")
        try:
            face = read_font_face(path)
        except Exception as exc:
            raise FontLoadError(f"cannot read font metadata from {path}: {exc}") from exc

        if hasattr(self._font_map, "add_font_file"):
            try:
                added = self._font_map.add_font_file(path)
            except GLib.Error as exc:
                raise FontLoadError(f"Pango rejected {path}: {exc.message}") from exc
            if not added:
                raise FontLoadError(f"Pango rejected {path}")
        elif resolve_font_file_for_family(face.family) is not None:
            # Pango < 1.56 cannot take application fonts; use the installed copy
            LOGGER.warning("cannot register %s, using installed family %r", path, face.family)
        else:
            raise FontLoadError(
                f"cannot register {path} and family {face.family!r} is not installed"
            )

        self._faces.append(face)
        return len(self._faces) - 1

    def family_name_of(self, font_id: int) -> str:
        return self._faces[font_id].family

    def weight_of(self, font_id: int) -> int:
        return self._faces[font_id].weight


@dataclass
class GlyphIcon:
    """One glyph rasterized at several pixel densities."""

    name: str
    size: int
    textures: Dict[int, Gdk.Texture] = field(default_factory=dict)

    @property
    def scales(self) -> List[int]:
        return sorted(self.textures)

    def texture_for_scale(self, scale: int) -> Gdk.Texture:
        for available in self.scales:
            if available >= scale:
                return self.textures[available]
        return self.textures[self.scales[-1]]


def logical_size(point_size: int) -> int:
    return math.ceil(point_size * SCREEN_DPI / POINTS_PER_INCH)


def parse_colour(colour: Colour) -> Gdk.RGBA:
    if isinstance(colour, Gdk.RGBA):
        return colour
    rgba = Gdk.RGBA()
    if not rgba.parse(str(colour)):
        raise ValueError(f"not a colour: {colour!r}")
    return rgba


def _texture_from_surface(surface: cairo.ImageSurface) -> Gdk.Texture:
    surface.flush()
    data = GLib.Bytes.new(bytes(surface.get_data()))
    return Gdk.MemoryTexture.new(
        surface.get_width(), surface.get_height(), _MEMORY_FORMAT, data, surface.get_stride()
    )


def _render_glyph(char: str, face: FontFace, point_size: int, size: int, scale: int,
                  rgba: Gdk.RGBA) -> Gdk.Texture:
    pixels = size * scale
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, pixels, pixels)
    cr = cairo.Context(surface)
    cr.scale(scale, scale)

    layout = PangoCairo.create_layout(cr)
    PangoCairo.context_set_resolution(layout.get_context(), SCREEN_DPI)
    layout.context_changed()

    desc = Pango.FontDescription()
    desc.set_family(face.family)
    desc.set_weight(Pango.Weight(face.weight))
    desc.set_size(int(point_size * Pango.SCALE))
    layout.set_font_description(desc)
    layout.set_text(char, -1)

    ink, _logical = layout.get_pixel_extents()
    cr.move_to((size - ink.width) / 2.0 - ink.x, (size - ink.height) / 2.0 - ink.y)
    cr.set_source_rgba(rgba.red, rgba.green, rgba.blue, rgba.alpha)
    PangoCairo.show_layout(cr, layout)
    return _texture_from_surface(surface)


def render_icon(
    registry: GlyphRegistry,
    glyph_name: str,
    point_size: int,
    colour: Colour,
    scales: Sequence[int] = DEFAULT_SCALES,
    variant: Optional[Variant] = None,
) -> GlyphIcon:
    """Rasterize ``glyph_name`` into a square icon, once per scale factor.

    Raises GlyphNotFoundError for names the registry does not know; there is
    no placeholder glyph.
    """
    if point_size <= 0:
        raise ValueError(f"point size must be positive, got {point_size}")
    if not scales or any(s <= 0 for s in scales):
        raise ValueError(f"invalid scale factors: {scales!r}")
    rgba = parse_colour(colour)
    entry = registry.lookup(glyph_name)
    variant = variant or entry.variant
    if not entry.supports(variant):
        raise ValueError(f"glyph {glyph_name!r} is not in the {variant.name.lower()} font")

    face = registry.face(variant)
    size = logical_size(point_size)
    icon = GlyphIcon(name=glyph_name, size=size)
    for scale in scales:
        icon.textures[scale] = _render_glyph(entry.char, face, point_size, size, scale, rgba)
    return icon
