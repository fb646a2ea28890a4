# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import dataclasses
import logging
import typing

from ..charset import CHARACTER_SETS, PlainSubDot, TonalSubDot, sub_dot_for
from ..util import apply_case

if typing.TYPE_CHECKING:
    from ..charset import CharacterSet

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, kw_only=True)
class EmitChar:
    char: str


@dataclasses.dataclass(frozen=True, kw_only=True)
class OpenToneSelection:
    base_key: str


@dataclasses.dataclass(frozen=True, kw_only=True)
class NoOp:
    pass


Action = EmitChar | OpenToneSelection | NoOp


class PendingLetterResolver:
    """Decides what a printable keystroke turns into.

    The resolver keeps no state of its own; the Composer passes in whether tone select mode is
    armed and whether shift is in effect, then applies the resulting action.
    """

    def __init__(self, table: typing.Mapping[str, CharacterSet] = CHARACTER_SETS):
        self.table = table

    def resolve_key_press(self, key: str, *, tone_mode_active: bool, effective_shift: bool) -> Action:
        if len(key) != 1:
            # named control keys are the dispatch layer's business
            return NoOp()
        lowered = key.lower()
        if tone_mode_active and lowered in self.table:
            return OpenToneSelection(base_key=lowered)
        return EmitChar(char=apply_case(key, effective_shift))

    def sub_dot_options(self, letter: str, *, effective_shift: bool = False) -> list[str]:
        """The picker contents for a sub-dot menu: the plain letter and its dotted form."""
        sub = sub_dot_for(letter)
        if sub is None:
            return []
        return [apply_case(sub.plain, effective_shift), apply_case(sub.dotted, effective_shift)]

    def resolve_sub_dot(self, letter: str, *, tone_mode_active: bool, effective_shift: bool) -> Action:
        """Resolve an explicit choice of the underdotted form of ``letter``.

        Tonal dotted letters (ẹ, ọ) go on to tone selection when the mode is armed; ṣ has no tone
        variants and finishes straight away.
        """
        sub = sub_dot_for(letter)
        match sub:
            case TonalSubDot() if tone_mode_active and sub.tonal_key in self.table:
                return OpenToneSelection(base_key=sub.tonal_key)
            case TonalSubDot() | PlainSubDot():
                return EmitChar(char=apply_case(sub.dotted, effective_shift))
            case None:
                logger.debug("No sub-dot form for %r; treating as a plain key press", letter)
                return self.resolve_key_press(letter, tone_mode_active=tone_mode_active, effective_shift=effective_shift)
