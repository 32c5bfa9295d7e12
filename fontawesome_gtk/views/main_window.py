from typing import Callable, Dict, List, Optional

import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
gi.require_version("Gdk", "4.0")
gi.require_version("Pango", "1.0")
from gi.repository import Adw, Gtk, Gdk, Pango, Gio, GLib

from fontawesome_gtk.models import FontFace, Variant
from fontawesome_gtk.models.glyph_item import GlyphItem

VARIANT_CHOICES: List[Optional[Variant]] = [None, Variant.BRANDS, Variant.REGULAR, Variant.SOLID]
VARIANT_LABELS = ["All styles", "Brands", "Regular", "Solid"]

GLYPH_CSS = b".glyph{font-size:28px}.tile{padding:8px}.preview{padding:6px}"


class GlyphBrowserWindow(Adw.ApplicationWindow):
    def __init__(self, app: Adw.Application):
        super().__init__(application=app, title="Font Awesome Browser")
        self.set_default_size(900, 640)

        self.faces: Dict[Variant, FontFace] = {}
        self.variant: Optional[Variant] = None
        self.search_text = ""

        self._load_css()

        self.toast_overlay = Adw.ToastOverlay()
        self.set_content(self.toast_overlay)

        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=0)
        self.toast_overlay.set_child(vbox)

        header = Adw.HeaderBar()
        vbox.append(header)

        self.search_entry = Gtk.SearchEntry()
        self.search_entry.set_placeholder_text("Search glyph name or codepoint (e.g. star or f005)")
        header.pack_start(self.search_entry)

        self.variant_dropdown = Gtk.DropDown.new_from_strings(VARIANT_LABELS)
        self.variant_dropdown.set_valign(Gtk.Align.CENTER)
        self.variant_dropdown.set_tooltip_text("Show glyphs of one font style")
        header.pack_end(self.variant_dropdown)

        scroller = Gtk.ScrolledWindow()
        scroller.set_policy(Gtk.PolicyType.AUTOMATIC, Gtk.PolicyType.AUTOMATIC)
        scroller.set_hexpand(True)
        scroller.set_vexpand(True)
        vbox.append(scroller)

        self.base_store = Gio.ListStore(item_type=GlyphItem)
        self.filter_obj = Gtk.CustomFilter.new(self._filter_cb, None)
        self.filter_model = Gtk.FilterListModel(model=self.base_store, filter=self.filter_obj)
        self.selection = Gtk.NoSelection(model=self.filter_model)

        factory = Gtk.SignalListItemFactory()
        factory.connect("setup", self._factory_setup)
        factory.connect("bind", self._factory_bind)

        self.grid = Gtk.GridView(model=self.selection, factory=factory)
        self.grid.set_min_columns(1)
        self.grid.set_max_columns(0)
        scroller.set_child(self.grid)

        # Icon of the last clicked glyph and a live rich text preview
        preview = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)
        preview.add_css_class("preview")
        vbox.append(preview)

        self.icon_image = Gtk.Image()
        preview.append(self.icon_image)

        self.preview_entry = Gtk.Entry()
        self.preview_entry.set_placeholder_text("Type text with tags, e.g. Saved [fas check]")
        self.preview_entry.set_hexpand(True)
        preview.append(self.preview_entry)

        self.preview_label = Gtk.Label()
        self.preview_label.set_ellipsize(Pango.EllipsizeMode.END)
        self.preview_label.set_hexpand(True)
        self.preview_label.set_xalign(0.0)
        preview.append(self.preview_label)

        self._on_search_changed: Optional[Callable[[str], None]] = None
        self._on_variant_changed: Optional[Callable[[Optional[Variant]], None]] = None
        self._on_item_clicked: Optional[Callable[[GlyphItem], None]] = None
        self._on_preview_changed: Optional[Callable[[str], None]] = None

        self.search_entry.connect("search-changed", self._forward_search)
        self.variant_dropdown.connect("notify::selected", self._forward_variant_change)
        self.preview_entry.connect("changed", self._forward_preview)

    def bind_handlers(
        self,
        on_search_changed: Callable[[str], None],
        on_variant_changed: Callable[[Optional[Variant]], None],
        on_item_clicked: Callable[[GlyphItem], None],
        on_preview_changed: Callable[[str], None],
    ):
        self._on_search_changed = on_search_changed
        self._on_variant_changed = on_variant_changed
        self._on_item_clicked = on_item_clicked
        self._on_preview_changed = on_preview_changed

    def set_faces(self, faces: Dict[Variant, FontFace]):
        self.faces = dict(faces)

    def set_items(self, items: List[GlyphItem]):
        self.base_store.splice(0, self.base_store.get_n_items(), items)

    def set_search_text(self, text: str):
        self.search_text = (text or "").strip().lower()
        self.filter_obj.changed(Gtk.FilterChange.DIFFERENT)

    def set_variant(self, variant: Optional[Variant]):
        self.variant = variant
        self.filter_obj.changed(Gtk.FilterChange.DIFFERENT)
        # rebind visible tiles so they pick up the new face
        self.grid.set_model(None)
        self.grid.set_model(self.selection)

    def foreground_colour(self) -> Gdk.RGBA:
        if hasattr(self, "get_color"):
            return self.get_color()
        rgba = Gdk.RGBA()
        rgba.parse("black")
        return rgba

    def show_icon(self, texture: Gdk.Texture, size: int):
        self.icon_image.set_from_paintable(texture)
        self.icon_image.set_pixel_size(size)

    def set_preview(self, markup: str, plain: str):
        try:
            Pango.parse_markup(markup, -1, "\0")
        except GLib.Error:
            self.preview_label.set_text(plain)
            return
        self.preview_label.set_markup(markup)

    def copy_to_clipboard(self, text: str, toast_message: Optional[str] = None):
        display = Gdk.Display.get_default()
        if not display:
            self.show_toast("Failed to access display clipboard")
            return
        display.get_clipboard().set(text)
        if toast_message:
            self.show_toast(toast_message)

    def show_toast(self, message: str):
        self.toast_overlay.add_toast(Adw.Toast.new(message))

    def _load_css(self):
        provider = Gtk.CssProvider()
        provider.load_from_data(GLYPH_CSS)
        display = Gdk.Display.get_default()
        if display:
            Gtk.StyleContext.add_provider_for_display(
                display, provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
            )

    def _forward_search(self, entry: Gtk.SearchEntry):
        if self._on_search_changed:
            self._on_search_changed(entry.get_text() or "")

    def _forward_variant_change(self, *_):
        idx = self.variant_dropdown.get_selected()
        variant = VARIANT_CHOICES[idx] if 0 <= idx < len(VARIANT_CHOICES) else None
        if self._on_variant_changed:
            self._on_variant_changed(variant)

    def _forward_preview(self, entry: Gtk.Entry):
        if self._on_preview_changed:
            self._on_preview_changed(entry.get_text() or "")

    def _face_for(self, item: GlyphItem) -> Optional[FontFace]:
        variant = self.variant if self.variant and item.entry.supports(self.variant) else item.entry.variant
        return self.faces.get(variant)

    def _filter_cb(self, item: GlyphItem, _data=None) -> bool:
        if self.variant is not None and not item.entry.supports(self.variant):
            return False
        if not self.search_text:
            return True
        hay = f"{item.name} U+{item.codepoint:04X} {item.codepoint:04x}".lower()
        return self.search_text in hay

    def _factory_setup(self, _factory: Gtk.SignalListItemFactory, list_item: Gtk.ListItem):
        glyph = Gtk.Label(css_classes=["glyph"])
        caption = Gtk.Label(ellipsize=Pango.EllipsizeMode.MIDDLE, max_width_chars=14)
        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        content.append(glyph)
        content.append(caption)

        tile = Gtk.Button(child=content, css_classes=["card", "tile"])
        tile.set_size_request(112, 96)
        tile.connect("clicked", self._handle_item_click, list_item)
        list_item.set_child(tile)

    def _factory_bind(self, _factory: Gtk.SignalListItemFactory, list_item: Gtk.ListItem):
        item = list_item.get_item()
        if not isinstance(item, GlyphItem):
            return
        tile = list_item.get_child()
        glyph = tile.get_child().get_first_child()
        caption = glyph.get_next_sibling()

        attrs = Pango.AttrList()
        face = self._face_for(item)
        if face is not None:
            attrs.insert(Pango.attr_family_new(face.family))
            attrs.insert(Pango.attr_weight_new(Pango.Weight(face.weight)))
        glyph.set_attributes(attrs)
        glyph.set_label(item.char())
        caption.set_label(item.name)
        tile.set_tooltip_text(f"{item.name} {item.code_hex()}, click to copy its tag")

    def _handle_item_click(self, _button: Gtk.Button, list_item: Gtk.ListItem):
        item = list_item.get_item()
        if self._on_item_clicked and isinstance(item, GlyphItem):
            self._on_item_clicked(item)
