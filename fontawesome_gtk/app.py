import logging
import sys

import gi
gi.require_version("Adw", "1")
from gi.repository import Adw

from fontawesome_gtk.controllers.browser_controller import BrowserController
from fontawesome_gtk.fontawesome import FontAwesome
from fontawesome_gtk.models import FontLoadError
from fontawesome_gtk.views.main_window import GlyphBrowserWindow

LOGGER = logging.getLogger(__name__)

APP_ID = "com.example.FontAwesomeBrowser"


class GlyphBrowserApp(Adw.Application):
    def __init__(self, fontawesome: FontAwesome):
        super().__init__(application_id=APP_ID, flags=0)
        Adw.init()
        self.fontawesome = fontawesome
        self.connect("activate", self.on_activate)
        self._controller = None

    def on_activate(self, app):
        win = GlyphBrowserWindow(self)
        self._controller = BrowserController(win, self.fontawesome)
        win.present()


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    fontawesome = FontAwesome.create()
    try:
        fontawesome.registry.ensure_initialized()
    except FontLoadError as exc:
        LOGGER.error("%s", exc)
        return 1
    app = GlyphBrowserApp(fontawesome)
    return app.run(sys.argv if argv is None else argv)


if __name__ == "__main__":
    raise SystemExit(main())
