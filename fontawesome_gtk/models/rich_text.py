"""Conversion of ``[fab|far|fas <glyph>]`` tagged text to Pango markup."""

import html
import logging
import re
from typing import List, Optional

from fontawesome_gtk.models.glyph import Variant
from fontawesome_gtk.models.registry import GlyphRegistry

LOGGER = logging.getLogger(__name__)

TAG_OPEN = "["
TAG_CLOSE = "]"

# selector, one whitespace run, then the rest is the glyph name
_TAG_BODY = re.compile(r"(\S+)\s+(\S.*)", re.DOTALL)


def glyph_span(registry: GlyphRegistry, variant: Variant, code_point: int) -> str:
    face = registry.face(variant)
    family = html.escape(face.family, quote=True)
    return f'<span font_family="{family}" font_weight="{face.weight}">{chr(code_point)}</span>'


def _resolve_tag(body: str, registry: GlyphRegistry) -> Optional[str]:
    match = _TAG_BODY.fullmatch(body)
    if match is None:
        return None
    selector, glyph_name = match.groups()
    variant = Variant.from_selector(selector)
    if variant is None:
        return None
    entry = registry.get(glyph_name)
    if entry is None or not entry.supports(variant):
        return None
    return glyph_span(registry, variant, entry.code_point)


def rich_text(text: str, registry: GlyphRegistry) -> str:
    """Replace every well formed glyph tag in ``text`` with a styled span.

    Text outside tags is copied unchanged. A tag that is malformed, names an
    unknown selector or an unknown glyph stays in the output as written.
    """
    registry.ensure_initialized()
    out: List[str] = []
    tag: List[str] = []
    inside = False

    for ch in text:
        if not inside:
            if ch == TAG_OPEN:
                inside = True
                tag = []
            else:
                out.append(ch)
            continue

        if ch == TAG_OPEN:
            # an earlier "[" never closed; keep it as text and restart here
            out.append(TAG_OPEN)
            out.extend(tag)
            tag = []
        elif ch == TAG_CLOSE:
            body = "".join(tag)
            span = _resolve_tag(body, registry)
            if span is None:
                LOGGER.debug("leaving tag %r as text", body)
                out.append(TAG_OPEN + body + TAG_CLOSE)
            else:
                out.append(span)
            inside = False
        else:
            tag.append(ch)

    if inside:
        out.append(TAG_OPEN)
        out.extend(tag)

    return "".join(out)
