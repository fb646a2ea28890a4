# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import datetime
import logging
import typing

import msgspec

from ..keyboard_consts import Key

logger = logging.getLogger(__name__)

DOUBLE_PRESS_MIN = datetime.timedelta(milliseconds=20)
DOUBLE_PRESS_MAX = datetime.timedelta(milliseconds=350)


class ModifierState(msgspec.Struct):
    toggled: bool = False
    physically_held: bool = False
    last_press_timestamp: typing.Optional[datetime.timedelta] = None

    @property
    def effective_shift(self):
        return self.toggled or self.physically_held


def _no_double_press():
    pass


class ModifierTracker:
    """Tracks the Shift key and spots the double-press gesture.

    Two Shift presses count as a double press when the gap between them is strictly between
    ``double_press_min`` and ``double_press_max``. The lower bound rejects bounced or duplicated
    hardware events; the upper bound is what makes it a deliberate fast gesture.
    """

    def __init__(
        self,
        on_double_press: collections.abc.Callable[[], None] = _no_double_press,
        double_press_min: datetime.timedelta = DOUBLE_PRESS_MIN,
        double_press_max: datetime.timedelta = DOUBLE_PRESS_MAX,
    ):
        self.state = ModifierState()
        self.on_double_press = on_double_press
        self.double_press_min = double_press_min
        self.double_press_max = double_press_max

    def is_double_press(self, timestamp: datetime.timedelta) -> bool:
        last = self.state.last_press_timestamp
        if last is None:
            return False
        delta = timestamp - last
        # a clock that went backwards lands below the lower bound too
        return self.double_press_min < delta < self.double_press_max

    def on_key_down(self, key: Key, timestamp: datetime.timedelta, repeat: bool = False):
        if key is not Key.SHIFT:
            return
        if repeat:
            # autorepeat of a held key is not a new press
            self.state.physically_held = True
            return
        double = self.is_double_press(timestamp)
        self.state.last_press_timestamp = timestamp
        self.state.physically_held = True
        if double:
            logger.debug("Double shift detected at %s", timestamp)
            self.on_double_press()

    def on_key_up(self, key: Key):
        if key is Key.SHIFT:
            self.state.physically_held = False

    def toggle_shift_lock(self):
        self.state.toggled = not self.state.toggled

    @property
    def effective_shift(self) -> bool:
        return self.state.effective_shift
