import pytest

from fontawesome_gtk.models import (
    FontLoadError,
    FontPaths,
    GlyphNotFoundError,
    GlyphRegistry,
    Variant,
)
from fontawesome_gtk.models.glyph_data import iter_glyphs

from conftest import BRANDS_FAMILY, FREE_FAMILY, FakeFontLoader


def test_fonts_are_loaded_on_first_read_only(registry, loader):
    assert loader.loaded == []
    assert not registry.initialized

    registry.lookup("star")
    assert registry.initialized
    assert len(loader.loaded) == 3

    registry.ensure_initialized()
    registry.lookup("home")
    assert len(loader.loaded) == 3


def test_every_compiled_glyph_resolves(registry):
    for name, variant, code_point in iter_glyphs():
        entry = registry.lookup(name)
        assert entry.code_point == code_point
        assert entry.supports(variant)


def test_lookup_solid_and_regular_glyph(registry):
    entry = registry.lookup("star")
    assert entry.code_point == 0xF005
    assert entry.variant is Variant.SOLID
    assert entry.variants == frozenset({Variant.REGULAR, Variant.SOLID})
    assert entry.char == "\uf005"
    assert entry.code_hex() == "U+F005"


def test_lookup_brand_glyph(registry):
    entry = registry.lookup("github")
    assert entry.variant is Variant.BRANDS
    assert entry.variants == frozenset({Variant.BRANDS})


def test_lookup_is_exact_match(registry):
    with pytest.raises(GlyphNotFoundError):
        registry.lookup("Star")
    with pytest.raises(GlyphNotFoundError):
        registry.lookup(" star")


def test_unknown_glyph(registry):
    with pytest.raises(KeyError) as excinfo:
        registry.lookup("not-a-real-glyph")
    assert isinstance(excinfo.value, GlyphNotFoundError)
    assert excinfo.value.name == "not-a-real-glyph"
    assert "not-a-real-glyph" in str(excinfo.value)
    assert registry.get("not-a-real-glyph") is None


def test_family_names_and_faces(registry):
    assert registry.family_name(Variant.BRANDS) == BRANDS_FAMILY
    assert registry.family_name(Variant.REGULAR) == FREE_FAMILY
    assert registry.family_name(Variant.SOLID) == FREE_FAMILY
    assert registry.face(Variant.REGULAR).weight == 400
    assert registry.face(Variant.SOLID).weight == 900


def test_fonts_load_in_variant_order(registry, loader):
    registry.ensure_initialized()
    assert loader.loaded == [
        "/opt/fonts/fa-brands-400.ttf",
        "/opt/fonts/fa-regular-400.ttf",
        "/opt/fonts/fa-solid-900.ttf",
    ]


def test_font_load_failure_is_fatal():
    registry = GlyphRegistry(
        FakeFontLoader(fail_on="fa-solid-900.ttf"),
        fonts=FontPaths.from_directory("/opt/fonts"),
    )
    with pytest.raises(FontLoadError, match="solid"):
        registry.lookup("star")
    assert not registry.initialized


def test_font_load_error_from_loader_propagates():
    class RejectingLoader(FakeFontLoader):
        def load_font(self, path):
            raise FontLoadError(f"rejected {path}")

    registry = GlyphRegistry(RejectingLoader(), fonts=FontPaths.from_directory("/opt/fonts"))
    with pytest.raises(FontLoadError, match="rejected /opt/fonts/fa-brands-400.ttf"):
        registry.ensure_initialized()


def test_conflicting_code_points_are_rejected(loader):
    glyphs = [("star", Variant.SOLID, 0xF005), ("star", Variant.REGULAR, 0xF006)]
    registry = GlyphRegistry(loader, fonts=FontPaths.from_directory("/opt/fonts"), glyphs=glyphs)
    with pytest.raises(ValueError, match="star"):
        registry.ensure_initialized()


def test_custom_glyph_table(loader):
    glyphs = [("bell", Variant.REGULAR, 0xF0F3)]
    registry = GlyphRegistry(loader, fonts=FontPaths.from_directory("/opt/fonts"), glyphs=glyphs,
                             scan_fonts=False)
    assert len(registry) == 1
    entry = registry.lookup("bell")
    assert entry.variant is Variant.REGULAR


def test_names_by_variant(registry):
    regular = registry.names(Variant.REGULAR)
    assert "star" in regular
    assert "home" not in regular
    assert "home" in registry.names(Variant.SOLID)
    assert "github" in registry.names(Variant.BRANDS)
    assert registry.names() == sorted(registry.names())


def test_container_protocol(registry):
    assert "star" in registry
    assert "not-a-real-glyph" not in registry
    entries = list(registry)
    assert len(entries) == len(registry)
    assert [e.name for e in entries] == sorted(e.name for e in entries)


def test_scan_fonts_adds_glyphs_from_cmap(font_dir, loader):
    registry = GlyphRegistry(loader, fonts=FontPaths.from_directory(str(font_dir)), scan_fonts=True)

    tux = registry.lookup("tux-extra")
    assert tux.code_point == 0xF8F0
    assert tux.variant is Variant.BRANDS

    sparkle = registry.lookup("sparkle-extra")
    assert sparkle.variant is Variant.SOLID

    # outside the private use area, so not an icon
    assert "space" not in registry
    # compiled table entries survive the merge
    assert registry.lookup("star").variants == frozenset({Variant.REGULAR, Variant.SOLID})


def test_default_registry_knows_every_glyph_the_fonts_name(font_dir, loader):
    registry = GlyphRegistry(loader, fonts=FontPaths.from_directory(str(font_dir)))

    truck = registry.lookup("truck")
    assert truck.code_point == 0xF0D1
    assert truck.variant is Variant.SOLID
    assert registry.lookup("coffee").code_point == 0xF0F4
    assert "truck" in registry.names(Variant.SOLID)
    assert "truck" not in registry.names(Variant.REGULAR)


def test_unreadable_font_while_scanning_is_fatal(loader):
    registry = GlyphRegistry(loader, fonts=FontPaths.from_directory("/opt/fonts"))
    with pytest.raises(FontLoadError, match="glyph names"):
        registry.ensure_initialized()
    assert not registry.initialized


def test_compiled_table_alone_when_scanning_is_off(font_dir, loader):
    registry = GlyphRegistry(loader, fonts=FontPaths.from_directory(str(font_dir)), scan_fonts=False)
    with pytest.raises(GlyphNotFoundError):
        registry.lookup("truck")
