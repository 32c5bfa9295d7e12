from typing import Optional

import gi
gi.require_version("GObject", "2.0")
from gi.repository import GObject

from fontawesome_gtk.models.glyph import GlyphEntry, Variant


class GlyphItem(GObject.GObject):
    name = GObject.Property(type=str)
    codepoint = GObject.Property(type=int)
    selector = GObject.Property(type=str)

    def __init__(self, entry: GlyphEntry):
        super().__init__()
        self.entry = entry
        self.name = entry.name
        self.codepoint = entry.code_point
        self.selector = entry.variant.selector

    def char(self) -> str:
        return self.entry.char

    def code_hex(self) -> str:
        return self.entry.code_hex()

    def tag(self, variant: Optional[Variant] = None) -> str:
        selector = variant.selector if variant is not None else self.selector
        return f"[{selector} {self.name}]"
