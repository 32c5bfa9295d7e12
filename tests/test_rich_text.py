import pytest

from fontawesome_gtk.models import FontFace, FontPaths, GlyphRegistry, rich_text

from conftest import FakeFontLoader

SOLID_STAR = '<span font_family="Font Awesome 5 Free" font_weight="900">\uf005</span>'
REGULAR_STAR = '<span font_family="Font Awesome 5 Free" font_weight="400">\uf005</span>'
GITHUB = '<span font_family="Font Awesome 5 Brands" font_weight="400">\uf09b</span>'


@pytest.mark.parametrize("text", [
    "",
    "plain text",
    "<b>bold</b> &amp; markup",
    "closing ] only",
    "unicode é中",
])
def test_text_without_tags_is_unchanged(registry, text):
    assert rich_text(text, registry) == text


def test_registry_is_initialized_by_conversion(registry):
    rich_text("nothing to do", registry)
    assert registry.initialized


def test_solid_tag(registry):
    assert rich_text("[fas star]", registry) == SOLID_STAR


def test_regular_tag(registry):
    assert rich_text("[far star]", registry) == REGULAR_STAR


def test_brand_tag(registry):
    assert rich_text("[fab github]", registry) == GITHUB


def test_surrounding_text_is_preserved(registry):
    assert rich_text("text [fas star] more", registry) == "text " + SOLID_STAR + " more"


def test_several_tags(registry):
    result = rich_text("[fab github][fas star] and [far star]", registry)
    assert result == GITHUB + SOLID_STAR + " and " + REGULAR_STAR


@pytest.mark.parametrize("text", [
    "[fas unknown-glyph]",
    "[fab star]",
    "[far home]",
    "[fa star]",
    "[fas]",
    "[]",
    "[ fas star]",
    "[fas star ]",
    "[fas star extra]",
])
def test_unresolvable_tags_are_left_as_text(registry, text):
    assert rich_text(text, registry) == text


def test_bad_tag_does_not_disturb_neighbours(registry):
    result = rich_text("[fas star] [fas nope] [fas star]", registry)
    assert result == SOLID_STAR + " [fas nope] " + SOLID_STAR


def test_selector_is_split_on_first_whitespace_run(registry):
    assert rich_text("[fas   star]", registry) == SOLID_STAR
    assert rich_text("[fas\tstar]", registry) == SOLID_STAR


def test_unterminated_tag_is_literal(registry):
    assert rich_text("abc [fas star", registry) == "abc [fas star"
    assert rich_text("[", registry) == "["


def test_reopened_tag_keeps_earlier_bracket(registry):
    assert rich_text("[[fas star]", registry) == "[" + SOLID_STAR
    assert rich_text("[oops [fas star] x", registry) == "[oops " + SOLID_STAR + " x"


def test_family_name_is_escaped_in_markup():
    faces = {
        "fa-brands-400.ttf": FontFace('Odd "Brands" & Co', 400),
        "fa-regular-400.ttf": FontFace("Free", 400),
        "fa-solid-900.ttf": FontFace("Free", 900),
    }
    registry = GlyphRegistry(FakeFontLoader(faces), fonts=FontPaths.from_directory("/opt/fonts"),
                             scan_fonts=False)
    result = rich_text("[fab github]", registry)
    assert 'font_family="Odd &quot;Brands&quot; &amp; Co"' in result


def test_glyph_found_only_in_font_cmap(font_dir):
    registry = GlyphRegistry(FakeFontLoader(), fonts=FontPaths.from_directory(str(font_dir)))
    assert rich_text("load [fas truck]", registry) == (
        'load <span font_family="Font Awesome 5 Free" font_weight="900">\uf0d1</span>'
    )
    assert rich_text("[far truck]", registry) == "[far truck]"
