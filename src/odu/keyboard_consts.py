# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum


# Logical key identities. Values follow the DOM KeyboardEvent.key names, since that is what
# most hosts (browser, Electron) hand us; everything printable arrives as CHARACTER.
class Key(enum.Enum):
    SHIFT = "Shift"
    ESCAPE = "Escape"
    ENTER = "Enter"
    SPACE = " "
    BACKSPACE = "Backspace"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    # the on-screen mode key; labelled "Fn", or "Scale" while tone select mode is armed
    FN = "Fn"
    CHARACTER = "Character"

    @classmethod
    def from_name(cls, name: str):
        if name in _ALIASES:
            return _ALIASES[name]
        try:
            return cls(name)
        except ValueError:
            return cls.CHARACTER


_ALIASES = {
    "Space": Key.SPACE,
    "Spacebar": Key.SPACE,
    "Esc": Key.ESCAPE,
    "Left": Key.ARROW_LEFT,
    "Right": Key.ARROW_RIGHT,
    "Scale": Key.FN,
}

