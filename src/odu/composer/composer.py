# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import typing

from ..charset import CHARACTER_SETS
from ..events import KeyEvent, KeyPress
from ..keyboard_consts import Key
from ..settings import ReentryPolicy, Settings, ToneModePolicy
from .modifiers import ModifierTracker
from .resolver import EmitChar, NoOp, OpenToneSelection, PendingLetterResolver
from .selector import ToneSelector, silent_cue

if typing.TYPE_CHECKING:
    from ..charset import CharacterSet
    from .resolver import Action
    from .selector import ToneCue, ToneSelection

logger = logging.getLogger(__name__)


def _no_backspace():
    pass


# Tone select mode: a double Shift arms it, and the next tonal letter opens the picker instead
# of going straight to the host. The Composer never sees the host's text; it only calls emit()
# and request_backspace().
class Composer:
    def __init__(
        self,
        emit: collections.abc.Callable[[str], None],
        request_backspace: collections.abc.Callable[[], None] = _no_backspace,
        *,
        settings: typing.Optional[Settings] = None,
        cue: ToneCue = silent_cue,
        table: typing.Mapping[str, CharacterSet] = CHARACTER_SETS,
    ):
        if settings is None:
            settings = Settings()
        self.settings = settings
        self.emit = emit
        self.request_backspace = request_backspace
        self.tone_mode_active = False
        self.modifiers = ModifierTracker(
            on_double_press=self.toggle_tone_mode,
            double_press_min=settings.double_press_min,
            double_press_max=settings.double_press_max,
        )
        self.resolver = PendingLetterResolver(table)
        self.selector = ToneSelector(table, cue)

    @property
    def effective_shift(self) -> bool:
        return self.modifiers.effective_shift

    @property
    def selection(self) -> typing.Optional[ToneSelection]:
        return self.selector.selection

    def selection_choices(self) -> list[str]:
        return self.selector.choices(self.effective_shift)

    def toggle_tone_mode(self):
        self.tone_mode_active = not self.tone_mode_active
        logger.debug("Tone select mode %s", "armed" if self.tone_mode_active else "disarmed")

    def disarm(self):
        if self.tone_mode_active:
            logger.debug("Tone select mode disarmed")
        self.tone_mode_active = False

    # on-screen keys

    def press_shift_key(self):
        self.modifiers.toggle_shift_lock()

    def press_mode_key(self):
        self.toggle_tone_mode()

    def press_character(self, char: str) -> bool:
        if len(char) != 1:
            # named keys (Control, Tab, ArrowUp...) neither settle nor consume anything
            return False
        self._settle_pending()
        action = self.resolver.resolve_key_press(
            char, tone_mode_active=self.tone_mode_active, effective_shift=self.effective_shift
        )
        return self._apply(action)

    def choose_sub_dot(self, letter: str) -> bool:
        self._settle_pending()
        action = self.resolver.resolve_sub_dot(
            letter, tone_mode_active=self.tone_mode_active, effective_shift=self.effective_shift
        )
        return self._apply(action)

    def sub_dot_options(self, letter: str) -> list[str]:
        return self.resolver.sub_dot_options(letter, effective_shift=self.effective_shift)

    # tone selection

    def move_next(self):
        self.selector.move_next()

    def move_prev(self):
        self.selector.move_prev()

    def move_to(self, index: int):
        self.selector.move_to(index)

    def confirm(self) -> typing.Optional[str]:
        if not self.selector.active:
            return None
        result = self.selector.confirm(self.effective_shift)
        return self._finish(result)

    def confirm_at(self, index: int) -> typing.Optional[str]:
        if not self.selector.active:
            return None
        result = self.selector.confirm_at(index, self.effective_shift)
        return self._finish(result)

    def cancel(self):
        if not self.selector.active:
            return
        self.selector.cancel()
        self.disarm()

    def _finish(self, result: typing.Optional[str]):
        self.tone_mode_active = False
        if result is not None:
            self.emit(result)
        return result

    def _settle_pending(self):
        if not self.selector.active:
            return
        match self.settings.reentry_policy:
            case ReentryPolicy.CONFIRM:
                self.confirm()
            case ReentryPolicy.CANCEL:
                self.cancel()

    def _apply(self, action: Action) -> bool:
        match action:
            case OpenToneSelection(base_key=base_key):
                self.tone_mode_active = False
                self.selector.open(base_key)
                return True
            case EmitChar(char=char):
                self.emit(char)
                if self.settings.tone_mode_policy is ToneModePolicy.CLEAR_ON_MISS:
                    self.disarm()
                return True
            case NoOp():
                return False

    # physical keys

    def handle_key_event(self, event: KeyEvent) -> bool:
        """Process one key event from the host. Returns True if the event was consumed, in which
        case the host should suppress its own handling of it."""
        if event.key is Key.SHIFT:
            if event.press is KeyPress.RELEASED:
                self.modifiers.on_key_up(event.key)
            else:
                self.modifiers.on_key_down(event.key, event.timestamp, repeat=event.press is KeyPress.REPEATED)
            return False
        if not event.is_press:
            return False
        if self.selector.active and self._handle_selecting(event):
            return True

        match event.key:
            case Key.ESCAPE:
                if not self.tone_mode_active:
                    return False
                self.disarm()
                return True
            case Key.BACKSPACE:
                self.request_backspace()
                return True
            case Key.SPACE:
                # a space never consumes the armed mode
                self.emit(" ")
                return True
            case Key.FN:
                self.press_mode_key()
                return True
            case Key.CHARACTER if event.character:
                return self.press_character(event.character)
        return False

    def _handle_selecting(self, event: KeyEvent) -> bool:
        match event.key:
            case Key.ARROW_RIGHT:
                self.move_next()
            case Key.ARROW_LEFT:
                self.move_prev()
            case Key.ENTER | Key.SPACE:
                self.confirm()
            case Key.ESCAPE:
                self.cancel()
            case Key.CHARACTER if event.character in self.settings.digit_keys:
                self.confirm_at(self.settings.digit_keys.index(event.character))
            case _:
                return False
        return True
