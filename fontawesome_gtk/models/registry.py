import logging
import threading
from typing import Dict, Iterable, Iterator, List, Optional, Protocol, Tuple

from fontawesome_gtk.models.config import FontPaths
from fontawesome_gtk.models.font_utils import read_glyph_names_from_font
from fontawesome_gtk.models.glyph import FontFace, GlyphEntry, Variant
from fontawesome_gtk.models.glyph_data import iter_glyphs

LOGGER = logging.getLogger(__name__)

# Font Awesome keeps its icons in the private use area; anything else in the
# cmap (space, ASCII fallbacks) is not an icon.
_PRIVATE_USE = range(0xE000, 0xF900)


class FontLoadError(RuntimeError):
    """A required font could not be registered; the registry is unusable."""


class GlyphNotFoundError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown glyph: {self.name!r}"


class FontLoader(Protocol):
    def load_font(self, path: str) -> int: ...

    def family_name_of(self, font_id: int) -> str: ...

    def weight_of(self, font_id: int) -> int: ...


class GlyphRegistry:
    """Name to code point table for the three Font Awesome faces.

    Nothing touches the fonts until the first read, which loads all three
    through ``loader`` and builds the table once: the compiled-in names plus,
    unless ``scan_fonts`` is off, every private use glyph the fonts name in
    their cmaps. After that the registry is read-only.
    """

    def __init__(
        self,
        loader: FontLoader,
        fonts: Optional[FontPaths] = None,
        glyphs: Optional[Iterable[Tuple[str, Variant, int]]] = None,
        scan_fonts: bool = True,
    ):
        self._loader = loader
        self._fonts = fonts or FontPaths.default()
        self._glyphs = glyphs
        self._scan_fonts = scan_fonts
        self._lock = threading.Lock()
        self._faces: Dict[Variant, FontFace] = {}
        self._entries: Dict[str, GlyphEntry] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def ensure_initialized(self) -> "GlyphRegistry":
        if self._initialized:
            return self
        with self._lock:
            if not self._initialized:
                faces = self._load_faces()
                entries = self._build_table()
                self._faces = faces
                self._entries = entries
                self._initialized = True
                LOGGER.info("glyph registry ready: %d glyphs", len(entries))
        return self

    def _load_faces(self) -> Dict[Variant, FontFace]:
        faces: Dict[Variant, FontFace] = {}
        for variant in Variant:
            path = self._fonts.for_variant(variant)
            try:
                font_id = self._loader.load_font(path)
                face = FontFace(
                    family=self._loader.family_name_of(font_id),
                    weight=self._loader.weight_of(font_id),
                )
            except FontLoadError:
                raise
            except Exception as exc:
                raise FontLoadError(f"failed to load {variant.name.lower()} font from {path}: {exc}") from exc
            LOGGER.info("loaded %s font %s (%s %d)", variant.name.lower(), path, face.family, face.weight)
            faces[variant] = face
        return faces

    def _build_table(self) -> Dict[str, GlyphEntry]:
        code_points: Dict[str, int] = {}
        variants: Dict[str, set] = {}
        triples = self._glyphs if self._glyphs is not None else iter_glyphs()
        for name, variant, code_point in triples:
            known = code_points.setdefault(name, code_point)
            if known != code_point:
                raise ValueError(
                    f"glyph {name!r} listed as U+{known:04X} and U+{code_point:04X}"
                )
            variants.setdefault(name, set()).add(variant)

        if self._scan_fonts:
            for variant in Variant:
                path = self._fonts.for_variant(variant)
                try:
                    cmap = read_glyph_names_from_font(path)
                except Exception as exc:
                    raise FontLoadError(f"cannot read glyph names from {path}: {exc}") from exc
                for cp, gname in cmap.items():
                    if cp not in _PRIVATE_USE:
                        continue
                    if gname not in code_points:
                        code_points[gname] = cp
                    if code_points[gname] == cp:
                        variants.setdefault(gname, set()).add(variant)

        entries: Dict[str, GlyphEntry] = {}
        for name, code_point in code_points.items():
            found = frozenset(variants[name])
            home = Variant.BRANDS if Variant.BRANDS in found else Variant.SOLID
            if home not in found:
                home = next(iter(found))
            entries[name] = GlyphEntry(name, code_point, home, found)
        return entries

    def lookup(self, name: str) -> GlyphEntry:
        self.ensure_initialized()
        try:
            return self._entries[name]
        except KeyError:
            raise GlyphNotFoundError(name) from None

    def get(self, name: str) -> Optional[GlyphEntry]:
        self.ensure_initialized()
        return self._entries.get(name)

    def face(self, variant: Variant) -> FontFace:
        self.ensure_initialized()
        return self._faces[variant]

    def family_name(self, variant: Variant) -> str:
        return self.face(variant).family

    def names(self, variant: Optional[Variant] = None) -> List[str]:
        self.ensure_initialized()
        return sorted(
            name for name, entry in self._entries.items()
            if variant is None or entry.supports(variant)
        )

    def __contains__(self, name: object) -> bool:
        self.ensure_initialized()
        return name in self._entries

    def __len__(self) -> int:
        self.ensure_initialized()
        return len(self._entries)

    def __iter__(self) -> Iterator[GlyphEntry]:
        self.ensure_initialized()
        return iter(sorted(self._entries.values(), key=lambda e: e.name))
