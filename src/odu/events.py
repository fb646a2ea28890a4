# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import datetime
import enum
import typing

import msgspec

from .keyboard_consts import Key

if typing.TYPE_CHECKING:
    from .composer.selector import ToneSelection


class KeyPress(enum.IntEnum):
    RELEASED = 0
    PRESSED = 1
    REPEATED = 2


class KeyEvent(msgspec.Struct, frozen=True):
    key: Key
    press: KeyPress
    timestamp: datetime.timedelta = datetime.timedelta()
    character: typing.Optional[str] = None

    @classmethod
    def pressed(cls, key: Key, timestamp: datetime.timedelta = datetime.timedelta()):
        return cls(key=key, press=KeyPress.PRESSED, timestamp=timestamp)

    @classmethod
    def released(cls, key: Key, timestamp: datetime.timedelta = datetime.timedelta()):
        return cls(key=key, press=KeyPress.RELEASED, timestamp=timestamp)

    @classmethod
    def typed(cls, character: str, timestamp: datetime.timedelta = datetime.timedelta()):
        return cls(key=Key.CHARACTER, press=KeyPress.PRESSED, timestamp=timestamp, character=character)

    @classmethod
    def from_name(cls, name: str, press: KeyPress = KeyPress.PRESSED, timestamp_ms: float = 0):
        """Build an event from a DOM-style key name such as "Shift", "ArrowLeft" or "a"."""
        key = Key.from_name(name)
        timestamp = datetime.timedelta(milliseconds=timestamp_ms)
        if key is Key.CHARACTER:
            return cls(key=key, press=press, timestamp=timestamp, character=name)
        return cls(key=key, press=press, timestamp=timestamp)

    @property
    def is_press(self):
        return self.press is not KeyPress.RELEASED


class Emitted(msgspec.Struct, frozen=True):
    text: str


class Backspaced(msgspec.Struct, frozen=True):
    pass


class ComposerStatus(msgspec.Struct, frozen=True):
    effective_shift: bool
    tone_mode_active: bool
    selection: typing.Optional[ToneSelection]


ComposerOutput = typing.Union[Emitted, Backspaced, ComposerStatus]
