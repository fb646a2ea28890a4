# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import typing

import msgspec

from ..charset import CHARACTER_SETS, Tone
from ..util import apply_case

if typing.TYPE_CHECKING:
    from ..charset import CharacterSet

logger = logging.getLogger(__name__)

TONE_COUNT = len(Tone)

ToneCue = collections.abc.Callable[[int], None]


class ToneSelection(msgspec.Struct, frozen=True):
    pending_key: str
    cursor_index: int = Tone.MID.value


def silent_cue(index: int):
    pass


class ToneSelector:
    """Holds the letter waiting for a tone, and a cursor over its low/mid/high variants.

    ``selection`` is None while idle. Confirming returns the finished character; it is up to the
    caller to hand it to the host. A pending key missing from the table is discarded rather than
    producing a broken character.
    """

    def __init__(self, table: typing.Mapping[str, CharacterSet] = CHARACTER_SETS, cue: ToneCue = silent_cue):
        self.table = table
        self.cue = cue
        self.selection: typing.Optional[ToneSelection] = None

    @property
    def active(self):
        return self.selection is not None

    def _play_cue(self):
        try:
            self.cue(self.selection.cursor_index)
        except Exception:
            logger.debug("Tone cue failed", exc_info=True)

    def open(self, pending_key: str):
        self.selection = ToneSelection(pending_key=pending_key)
        logger.debug("Selecting tone for %r", pending_key)
        self._play_cue()

    def move_to(self, index: int):
        if self.selection is None:
            return
        self.selection = msgspec.structs.replace(self.selection, cursor_index=index % TONE_COUNT)
        self._play_cue()

    def move_next(self):
        if self.selection is not None:
            self.move_to(self.selection.cursor_index + 1)

    def move_prev(self):
        if self.selection is not None:
            self.move_to(self.selection.cursor_index - 1 + TONE_COUNT)

    def choices(self, effective_shift: bool) -> list[str]:
        if self.selection is None:
            return []
        charset = self.table.get(self.selection.pending_key)
        if charset is None:
            return []
        return [apply_case(variant, effective_shift) for variant in charset.variants]

    def confirm(self, effective_shift: bool) -> typing.Optional[str]:
        if self.selection is None:
            return None
        return self.confirm_at(self.selection.cursor_index, effective_shift)

    def confirm_at(self, index: int, effective_shift: bool) -> typing.Optional[str]:
        if self.selection is None:
            return None
        pending_key = self.selection.pending_key
        self.selection = None
        charset = self.table.get(pending_key)
        if charset is None or index not in range(TONE_COUNT):
            logger.debug("Discarding selection for %r at index %r", pending_key, index)
            return None
        result = apply_case(charset.variant(index), effective_shift)
        logger.debug("Confirmed %r as %r", pending_key, result)
        return result

    def cancel(self):
        if self.selection is not None:
            logger.debug("Cancelled selection for %r", self.selection.pending_key)
        self.selection = None
