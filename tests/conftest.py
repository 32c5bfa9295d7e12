from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontawesome_gtk.models import FontFace, FontPaths, GlyphRegistry

BRANDS_FAMILY = "Font Awesome 5 Brands"
FREE_FAMILY = "Font Awesome 5 Free"

FAKE_FACES = {
    "fa-brands-400.ttf": FontFace(BRANDS_FAMILY, 400),
    "fa-regular-400.ttf": FontFace(FREE_FAMILY, 400),
    "fa-solid-900.ttf": FontFace(FREE_FAMILY, 900),
}


class FakeFontLoader:
    """Hands out faces by file name instead of talking to Pango."""

    def __init__(self, faces: Dict[str, FontFace] | None = None, fail_on: str | None = None):
        self.faces = dict(FAKE_FACES if faces is None else faces)
        self.fail_on = fail_on
        self.loaded: List[str] = []

    def load_font(self, path: str) -> int:
        if self.fail_on and path.endswith(self.fail_on):
            raise OSError(f"cannot open {path}")
        self.loaded.append(path)
        return len(self.loaded) - 1

    def family_name_of(self, font_id: int) -> str:
        return self.faces[os.path.basename(self.loaded[font_id])].family

    def weight_of(self, font_id: int) -> int:
        return self.faces[os.path.basename(self.loaded[font_id])].weight


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((800, 700))
    pen.lineTo((800, 0))
    pen.closePath()
    return pen.glyph()


def build_font(path: Path, family: str, weight: int, glyphs: Dict[str, int]) -> Path:
    names = [".notdef", *glyphs]
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(names)
    fb.setupCharacterMap({cp: name for name, cp in glyphs.items()})
    fb.setupGlyf({name: _box_glyph() for name in names})
    fb.setupHorizontalMetrics({name: (1000, 100) for name in names})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(usWeightClass=weight, sTypoAscender=800, sTypoDescender=-200,
                usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def loader() -> FakeFontLoader:
    return FakeFontLoader()


@pytest.fixture
def registry(loader: FakeFontLoader) -> GlyphRegistry:
    return GlyphRegistry(loader, fonts=FontPaths.from_directory("/opt/fonts"), scan_fonts=False)


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    build_font(tmp_path / "fa-brands-400.ttf", BRANDS_FAMILY, 400,
               {"github": 0xF09B, "tux-extra": 0xF8F0})
    build_font(tmp_path / "fa-regular-400.ttf", FREE_FAMILY, 400,
               {"space": 0x20, "star": 0xF005})
    build_font(tmp_path / "fa-solid-900.ttf", FREE_FAMILY, 900,
               {"star": 0xF005, "home": 0xF015, "truck": 0xF0D1,
                "coffee": 0xF0F4, "sparkle-extra": 0xF8F1})
    return tmp_path
