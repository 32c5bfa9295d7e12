"""Compiled-in Font Awesome 5 Free glyph table.

Regular glyphs are also carried by the solid font at the same code point,
so the solid table is the regular table plus the solid-only glyphs.
"""

from typing import Dict, Iterator, Tuple

from fontawesome_gtk.models.glyph import Variant

BRAND_GLYPHS: Dict[str, int] = {
    "amazon": 0xF270,
    "android": 0xF17B,
    "angular": 0xF420,
    "apple": 0xF179,
    "apple-pay": 0xF415,
    "atlassian": 0xF77B,
    "aws": 0xF375,
    "bitbucket": 0xF171,
    "bitcoin": 0xF379,
    "cc-mastercard": 0xF1F1,
    "cc-paypal": 0xF1F4,
    "cc-visa": 0xF1F0,
    "centos": 0xF789,
    "chrome": 0xF268,
    "confluence": 0xF78D,
    "creative-commons": 0xF25E,
    "css3": 0xF13C,
    "css3-alt": 0xF38B,
    "discord": 0xF392,
    "docker": 0xF395,
    "dropbox": 0xF16B,
    "edge": 0xF282,
    "ethereum": 0xF42E,
    "facebook": 0xF09A,
    "facebook-f": 0xF39E,
    "fedora": 0xF798,
    "firefox": 0xF269,
    "font-awesome": 0xF2B4,
    "font-awesome-flag": 0xF425,
    "git": 0xF1D3,
    "git-alt": 0xF841,
    "github": 0xF09B,
    "github-alt": 0xF113,
    "github-square": 0xF092,
    "gitlab": 0xF296,
    "google": 0xF1A0,
    "grunt": 0xF3AD,
    "gulp": 0xF3AE,
    "html5": 0xF13B,
    "instagram": 0xF16D,
    "java": 0xF4E4,
    "jira": 0xF7B1,
    "js": 0xF3B8,
    "less": 0xF41D,
    "linkedin": 0xF08C,
    "linkedin-in": 0xF0E1,
    "linux": 0xF17C,
    "markdown": 0xF60F,
    "mastodon": 0xF4F6,
    "microsoft": 0xF3CA,
    "node-js": 0xF3D3,
    "npm": 0xF3D4,
    "osi": 0xF41A,
    "paypal": 0xF1ED,
    "php": 0xF457,
    "python": 0xF3E2,
    "raspberry-pi": 0xF7BB,
    "react": 0xF41B,
    "reddit": 0xF1A1,
    "redhat": 0xF7BC,
    "safari": 0xF267,
    "sass": 0xF41E,
    "skype": 0xF17E,
    "slack": 0xF198,
    "spotify": 0xF1BC,
    "stack-overflow": 0xF16C,
    "steam": 0xF1B6,
    "swift": 0xF8E1,
    "telegram": 0xF2C6,
    "trello": 0xF181,
    "twitch": 0xF1E8,
    "twitter": 0xF099,
    "ubuntu": 0xF7DF,
    "vuejs": 0xF41F,
    "whatsapp": 0xF232,
    "windows": 0xF17A,
    "wordpress": 0xF19A,
    "yarn": 0xF7E3,
    "youtube": 0xF167,
}

REGULAR_GLYPHS: Dict[str, int] = {
    "address-book": 0xF2B9,
    "address-card": 0xF2BB,
    "angry": 0xF556,
    "arrow-alt-circle-down": 0xF358,
    "arrow-alt-circle-left": 0xF359,
    "arrow-alt-circle-right": 0xF35A,
    "arrow-alt-circle-up": 0xF35B,
    "bell": 0xF0F3,
    "bell-slash": 0xF1F6,
    "bookmark": 0xF02E,
    "building": 0xF1AD,
    "calendar": 0xF133,
    "calendar-alt": 0xF073,
    "calendar-check": 0xF274,
    "calendar-minus": 0xF272,
    "calendar-plus": 0xF271,
    "calendar-times": 0xF273,
    "caret-square-down": 0xF150,
    "caret-square-left": 0xF191,
    "caret-square-right": 0xF152,
    "caret-square-up": 0xF151,
    "chart-bar": 0xF080,
    "check-circle": 0xF058,
    "check-square": 0xF14A,
    "circle": 0xF111,
    "clipboard": 0xF328,
    "clock": 0xF017,
    "clone": 0xF24D,
    "closed-captioning": 0xF20A,
    "comment": 0xF075,
    "comment-alt": 0xF27A,
    "comment-dots": 0xF4AD,
    "comments": 0xF086,
    "compass": 0xF14E,
    "copy": 0xF0C5,
    "copyright": 0xF1F9,
    "credit-card": 0xF09D,
    "dizzy": 0xF567,
    "dot-circle": 0xF192,
    "edit": 0xF044,
    "envelope": 0xF0E0,
    "envelope-open": 0xF2B6,
    "eye": 0xF06E,
    "eye-slash": 0xF070,
    "file": 0xF15B,
    "file-alt": 0xF15C,
    "file-archive": 0xF1C6,
    "file-audio": 0xF1C7,
    "file-code": 0xF1C9,
    "file-excel": 0xF1C3,
    "file-image": 0xF1C5,
    "file-pdf": 0xF1C1,
    "file-powerpoint": 0xF1C4,
    "file-video": 0xF1C8,
    "file-word": 0xF1C2,
    "flag": 0xF024,
    "flushed": 0xF579,
    "folder": 0xF07B,
    "folder-open": 0xF07C,
    "frown": 0xF119,
    "frown-open": 0xF57A,
    "futbol": 0xF1E3,
    "gem": 0xF3A5,
    "grimace": 0xF57F,
    "grin": 0xF580,
    "grin-alt": 0xF581,
    "grin-beam": 0xF582,
    "grin-beam-sweat": 0xF583,
    "grin-hearts": 0xF584,
    "grin-squint": 0xF585,
    "grin-squint-tears": 0xF586,
    "grin-stars": 0xF587,
    "grin-tears": 0xF588,
    "grin-tongue": 0xF589,
    "grin-tongue-squint": 0xF58A,
    "grin-tongue-wink": 0xF58B,
    "grin-wink": 0xF58C,
    "hand-lizard": 0xF258,
    "hand-paper": 0xF256,
    "hand-peace": 0xF25B,
    "hand-point-down": 0xF0A7,
    "hand-point-left": 0xF0A5,
    "hand-point-right": 0xF0A4,
    "hand-point-up": 0xF0A6,
    "hand-pointer": 0xF25A,
    "hand-rock": 0xF255,
    "hand-scissors": 0xF257,
    "hand-spock": 0xF259,
    "handshake": 0xF2B5,
    "hdd": 0xF0A0,
    "heart": 0xF004,
    "hospital": 0xF0F8,
    "hourglass": 0xF254,
    "id-badge": 0xF2C1,
    "id-card": 0xF2C2,
    "image": 0xF03E,
    "images": 0xF302,
    "keyboard": 0xF11C,
    "kiss": 0xF596,
    "kiss-beam": 0xF597,
    "kiss-wink-heart": 0xF598,
    "laugh": 0xF599,
    "laugh-beam": 0xF59A,
    "laugh-squint": 0xF59B,
    "laugh-wink": 0xF59C,
    "lemon": 0xF094,
    "life-ring": 0xF1CD,
    "lightbulb": 0xF0EB,
    "list-alt": 0xF022,
    "map": 0xF279,
    "meh": 0xF11A,
    "meh-blank": 0xF5A4,
    "meh-rolling-eyes": 0xF5A5,
    "minus-square": 0xF146,
    "money-bill-alt": 0xF3D1,
    "moon": 0xF186,
    "newspaper": 0xF1EA,
    "object-group": 0xF247,
    "object-ungroup": 0xF248,
    "paper-plane": 0xF1D8,
    "pause-circle": 0xF28B,
    "play-circle": 0xF144,
    "plus-square": 0xF0FE,
    "question-circle": 0xF059,
    "registered": 0xF25D,
    "sad-cry": 0xF5B3,
    "sad-tear": 0xF5B4,
    "save": 0xF0C7,
    "share-square": 0xF14D,
    "smile": 0xF118,
    "smile-beam": 0xF5B8,
    "smile-wink": 0xF4DA,
    "snowflake": 0xF2DC,
    "square": 0xF0C8,
    "star": 0xF005,
    "star-half": 0xF089,
    "sticky-note": 0xF249,
    "stop-circle": 0xF28D,
    "sun": 0xF185,
    "surprise": 0xF5C2,
    "thumbs-down": 0xF165,
    "thumbs-up": 0xF164,
    "times-circle": 0xF057,
    "tired": 0xF5C8,
    "trash-alt": 0xF2ED,
    "user": 0xF007,
    "user-circle": 0xF2BD,
    "window-close": 0xF410,
    "window-maximize": 0xF2D0,
    "window-minimize": 0xF2D1,
    "window-restore": 0xF2D2,
}

SOLID_GLYPHS: Dict[str, int] = {
    **REGULAR_GLYPHS,
    "angle-down": 0xF107,
    "angle-left": 0xF104,
    "angle-right": 0xF105,
    "angle-up": 0xF106,
    "arrow-down": 0xF063,
    "arrow-left": 0xF060,
    "arrow-right": 0xF061,
    "arrow-up": 0xF062,
    "backward": 0xF04A,
    "ban": 0xF05E,
    "bars": 0xF0C9,
    "battery-full": 0xF240,
    "bolt": 0xF0E7,
    "book": 0xF02D,
    "bug": 0xF188,
    "bullseye": 0xF140,
    "calculator": 0xF1EC,
    "camera": 0xF030,
    "caret-down": 0xF0D7,
    "caret-up": 0xF0D8,
    "chart-line": 0xF201,
    "chart-pie": 0xF200,
    "check": 0xF00C,
    "chevron-down": 0xF078,
    "chevron-left": 0xF053,
    "chevron-right": 0xF054,
    "chevron-up": 0xF077,
    "circle-notch": 0xF1CE,
    "cloud": 0xF0C2,
    "cloud-download-alt": 0xF381,
    "cloud-upload-alt": 0xF382,
    "code": 0xF121,
    "cog": 0xF013,
    "cogs": 0xF085,
    "columns": 0xF0DB,
    "compress": 0xF066,
    "crosshairs": 0xF05B,
    "database": 0xF1C0,
    "desktop": 0xF108,
    "download": 0xF019,
    "ellipsis-h": 0xF141,
    "ellipsis-v": 0xF142,
    "exclamation": 0xF12A,
    "exclamation-circle": 0xF06A,
    "exclamation-triangle": 0xF071,
    "expand": 0xF065,
    "external-link-alt": 0xF35D,
    "film": 0xF008,
    "filter": 0xF0B0,
    "fire": 0xF06D,
    "flask": 0xF0C3,
    "forward": 0xF04E,
    "gamepad": 0xF11B,
    "gift": 0xF06B,
    "globe": 0xF0AC,
    "graduation-cap": 0xF19D,
    "headphones": 0xF025,
    "heartbeat": 0xF21E,
    "history": 0xF1DA,
    "home": 0xF015,
    "info": 0xF129,
    "info-circle": 0xF05A,
    "key": 0xF084,
    "laptop": 0xF109,
    "layer-group": 0xF5FD,
    "leaf": 0xF06C,
    "link": 0xF0C1,
    "list": 0xF03A,
    "lock": 0xF023,
    "lock-open": 0xF3C1,
    "magic": 0xF0D0,
    "map-marker-alt": 0xF3C5,
    "microchip": 0xF2DB,
    "microphone": 0xF130,
    "minus": 0xF068,
    "mobile-alt": 0xF3CD,
    "music": 0xF001,
    "network-wired": 0xF6FF,
    "paint-brush": 0xF1FC,
    "palette": 0xF53F,
    "paperclip": 0xF0C6,
    "pause": 0xF04C,
    "pen": 0xF304,
    "pencil-alt": 0xF303,
    "phone": 0xF095,
    "play": 0xF04B,
    "plug": 0xF1E6,
    "plus": 0xF067,
    "power-off": 0xF011,
    "print": 0xF02F,
    "question": 0xF128,
    "redo": 0xF01E,
    "reply": 0xF3E5,
    "rocket": 0xF135,
    "search": 0xF002,
    "server": 0xF233,
    "share": 0xF064,
    "share-alt": 0xF1E0,
    "shield-alt": 0xF3ED,
    "shopping-cart": 0xF07A,
    "signal": 0xF012,
    "sort": 0xF0DC,
    "spinner": 0xF110,
    "step-backward": 0xF048,
    "step-forward": 0xF051,
    "stop": 0xF04D,
    "sync": 0xF021,
    "sync-alt": 0xF2F1,
    "table": 0xF0CE,
    "tablet-alt": 0xF3FA,
    "tachometer-alt": 0xF3FD,
    "tag": 0xF02B,
    "tags": 0xF02C,
    "terminal": 0xF120,
    "th": 0xF00A,
    "times": 0xF00D,
    "tools": 0xF7D9,
    "trash": 0xF1F8,
    "trophy": 0xF091,
    "undo": 0xF0E2,
    "unlink": 0xF127,
    "unlock": 0xF09C,
    "upload": 0xF093,
    "user-minus": 0xF503,
    "user-plus": 0xF234,
    "users": 0xF0C0,
    "video": 0xF03D,
    "volume-down": 0xF027,
    "volume-mute": 0xF6A9,
    "volume-off": 0xF026,
    "volume-up": 0xF028,
    "wifi": 0xF1EB,
    "wrench": 0xF0AD,
}

_TABLES = (
    (Variant.BRANDS, BRAND_GLYPHS),
    (Variant.REGULAR, REGULAR_GLYPHS),
    (Variant.SOLID, SOLID_GLYPHS),
)


def iter_glyphs() -> Iterator[Tuple[str, Variant, int]]:
    for variant, table in _TABLES:
        for name, code_point in table.items():
            yield name, variant, code_point
