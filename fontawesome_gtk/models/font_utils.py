import os
import subprocess
from typing import Dict, Optional

from fontTools.ttLib import TTFont

from fontawesome_gtk.models.glyph import FontFace

# name table IDs: typographic family first, legacy family second
_FAMILY_NAME_IDS = (16, 1)


def resolve_font_file_for_family(family_name: str) -> Optional[str]:
    """Return the file fontconfig uses for ``family_name``, if it knows it.

    ``fc-match`` always answers with its closest match, so the answer only
    counts when the matched family is the one asked for.
    """
    try:
        res = subprocess.run(
            ["fc-match", "-f", "%{family}\n%{file}\n", family_name],
            capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    lines = (res.stdout or "").strip().splitlines()
    if len(lines) < 2:
        return None
    families = [f.strip().lower() for f in lines[0].split(",")]
    path = lines[1].strip()
    if family_name.lower() in families and os.path.isfile(path):
        return path
    return None


def read_font_face(path: str) -> FontFace:
    with TTFont(path, lazy=True) as tt:
        name_table = tt["name"]
        family = None
        for name_id in _FAMILY_NAME_IDS:
            family = name_table.getDebugName(name_id)
            if family:
                break
        if not family:
            raise ValueError(f"{path} has no family name")
        weight = tt["OS/2"].usWeightClass if "OS/2" in tt else 400
    return FontFace(family=family, weight=int(weight))


def read_glyph_names_from_font(path: str) -> Dict[int, str]:
    mapping: Dict[int, str] = {}
    with TTFont(path, lazy=True) as tt:
        best = tt.getBestCmap() or {}
        for cp, gname in best.items():
            mapping[int(cp)] = str(gname)
    return mapping
