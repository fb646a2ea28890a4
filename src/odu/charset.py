# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Static Yorùbá character data: the tonal variants of each vowel (and the syllabic nasal n),
plus the underdotted letters.

Tones are indexed low, mid, high, in the same order the picker shows them. The mid tone is
unmarked, so a CharacterSet's ``base`` doubles as its mid-tone form.
"""
from __future__ import annotations

import enum
import typing

import msgspec

from .commontypes import CharacterTableError
from .util import nfc

COMBINING_GRAVE = "\u0300"
COMBINING_ACUTE = "\u0301"


class Tone(enum.IntEnum):
    LOW = 0
    MID = 1
    HIGH = 2

    @property
    def label(self):
        return _TONE_LABELS[self]


_TONE_LABELS = {Tone.LOW: "Low (Do)", Tone.MID: "Mid (Re)", Tone.HIGH: "High (Mi)"}


class CharacterSet(msgspec.Struct, frozen=True):
    base: str
    high: str
    low: str

    @property
    def variants(self) -> tuple[str, str, str]:
        return (self.low, self.base, self.high)

    def variant(self, tone: int) -> str:
        return self.variants[Tone(tone)]


class TonalSubDot(msgspec.Struct, frozen=True):
    """An underdotted vowel, which has tone variants of its own."""

    plain: str
    dotted: str

    @property
    def tonal_key(self):
        return self.dotted


class PlainSubDot(msgspec.Struct, frozen=True):
    """An underdotted consonant; it is finished as soon as it is chosen."""

    plain: str
    dotted: str


SubDot = typing.Union[TonalSubDot, PlainSubDot]


def _tonal(base: str) -> CharacterSet:
    return CharacterSet(base=base, high=nfc(base + COMBINING_ACUTE), low=nfc(base + COMBINING_GRAVE))


# ẹ and ọ have no precomposed toned forms, so those stay as dot-below letter + combining mark.
CHARACTER_SETS: typing.Mapping[str, CharacterSet] = {
    "a": _tonal("a"),
    "e": _tonal("e"),
    "ẹ": _tonal("ẹ"),
    "i": _tonal("i"),
    "o": _tonal("o"),
    "ọ": _tonal("ọ"),
    "u": _tonal("u"),
    "n": _tonal("n"),
}

SUB_DOTS: typing.Mapping[str, SubDot] = {
    "e": TonalSubDot(plain="e", dotted="ẹ"),
    "o": TonalSubDot(plain="o", dotted="ọ"),
    "s": PlainSubDot(plain="s", dotted="ṣ"),
}

SUB_DOT_MAP: typing.Mapping[str, str] = {
    **{sub.plain: sub.dotted for sub in SUB_DOTS.values()},
    **{sub.plain.upper(): sub.dotted.upper() for sub in SUB_DOTS.values()},
}


def sub_dot_for(letter: str) -> typing.Optional[SubDot]:
    """Find the sub-dot entry for a letter, given either its plain or dotted form, in either case."""
    lowered = letter.lower()
    if lowered in SUB_DOTS:
        return SUB_DOTS[lowered]
    for sub in SUB_DOTS.values():
        if sub.dotted == lowered:
            return sub
    return None


def check_table(table: typing.Mapping[str, CharacterSet]):
    for key, charset in table.items():
        if charset.base.lower() != key:
            raise CharacterTableError(f"Entry {key!r} has mismatched base {charset.base!r}")
        variants = charset.variants
        if not all(variants):
            raise CharacterTableError(f"Entry {key!r} has an empty variant")
        if len(set(variants)) != len(variants):
            raise CharacterTableError(f"Entry {key!r} has duplicate variants {variants!r}")
    for sub in SUB_DOTS.values():
        if isinstance(sub, TonalSubDot) and sub.tonal_key not in table:
            raise CharacterTableError(f"Sub-dot letter {sub.dotted!r} is missing tone variants")
        if isinstance(sub, PlainSubDot) and sub.dotted in table:
            raise CharacterTableError(f"Sub-dot letter {sub.dotted!r} should not have tone variants")


check_table(CHARACTER_SETS)
