import logging
from typing import Optional

from fontawesome_gtk.fontawesome import FontAwesome
from fontawesome_gtk.models import Variant
from fontawesome_gtk.models.glyph_item import GlyphItem

LOGGER = logging.getLogger(__name__)

PREVIEW_POINT_SIZE = 24


class BrowserController:
    def __init__(self, view, fontawesome: FontAwesome):
        self.view = view
        self.fontawesome = fontawesome
        self.variant: Optional[Variant] = None

        self.view.bind_handlers(
            on_search_changed=self.on_search_changed,
            on_variant_changed=self.on_variant_changed,
            on_item_clicked=self.on_item_clicked,
            on_preview_changed=self.on_preview_changed,
        )

        registry = self.fontawesome.registry
        self.view.set_faces({variant: registry.face(variant) for variant in Variant})
        self.view.set_items([GlyphItem(entry) for entry in registry])

    def on_search_changed(self, text: str):
        self.view.set_search_text(text)

    def on_variant_changed(self, variant: Optional[Variant]):
        self.variant = variant
        self.view.set_variant(variant)

    def selector_for(self, item: GlyphItem) -> Variant:
        if self.variant is not None and item.entry.supports(self.variant):
            return self.variant
        return item.entry.variant

    def on_item_clicked(self, item: GlyphItem):
        variant = self.selector_for(item)
        tag = item.tag(variant)
        self.view.copy_to_clipboard(tag, f"Copied {tag} {item.code_hex()}")

        icon = self.fontawesome.icon(
            item.name, PREVIEW_POINT_SIZE, self.view.foreground_colour(), variant=variant
        )
        self.view.show_icon(icon.texture_for_scale(self.view.get_scale_factor()), icon.size)

    def on_preview_changed(self, text: str):
        markup = self.fontawesome.rich_text(text)
        LOGGER.debug("preview markup: %s", markup)
        self.view.set_preview(markup, text)
