# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from .accents import AccentDirection, apply_accent
from .charset import CHARACTER_SETS, SUB_DOT_MAP, CharacterSet, Tone
from .composer import Composer
from .events import KeyEvent, KeyPress
from .keyboard_consts import Key
from .settings import Settings

__all__ = [
    "AccentDirection",
    "CHARACTER_SETS",
    "CharacterSet",
    "Composer",
    "Key",
    "KeyEvent",
    "KeyPress",
    "SUB_DOT_MAP",
    "Settings",
    "Tone",
    "apply_accent",
]
