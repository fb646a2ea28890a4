# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

from .accents import accent_for_bracket, apply_accent
from .composer import Composer
from .keyboard_consts import Key

if typing.TYPE_CHECKING:
    from .events import KeyEvent

logger = logging.getLogger(__name__)


# A plain string with a cursor, and optionally a selection, standing in for whatever text widget
# a real surface has (textarea, contenteditable, native text field). Cursor positions count code
# points, not grapheme clusters: ẹ́ is two code points, and backspace removes one at a time, which
# is also what a browser textarea does.
class TextBuffer:
    def __init__(self, text: str = "", cursor: typing.Optional[int] = None):
        self.text = text
        self.cursor = len(text) if cursor is None else cursor
        self.anchor: typing.Optional[int] = None

    def __str__(self):
        return self.text

    @property
    def selection_range(self) -> typing.Optional[tuple[int, int]]:
        if self.anchor is None or self.anchor == self.cursor:
            return None
        return (min(self.anchor, self.cursor), max(self.anchor, self.cursor))

    def move_cursor(self, position: int):
        self.cursor = max(0, min(position, len(self.text)))
        self.anchor = None

    def select(self, start: int, end: int):
        self.anchor = max(0, min(start, len(self.text)))
        self.cursor = max(0, min(end, len(self.text)))

    def insert(self, chars: str):
        start, end = self.selection_range or (self.cursor, self.cursor)
        self.text = self.text[:start] + chars + self.text[end:]
        self.cursor = start + len(chars)
        self.anchor = None

    def backspace(self):
        selected = self.selection_range
        if selected is not None:
            start, end = selected
        elif self.cursor == 0:
            return
        else:
            start, end = self.cursor - 1, self.cursor
        self.text = self.text[:start] + self.text[end:]
        self.cursor = start
        self.anchor = None

    def apply_bracket(self, bracket: str) -> bool:
        direction = accent_for_bracket(bracket)
        if direction is None or self.selection_range is not None:
            return False
        rewritten = apply_accent(self.text[: self.cursor], direction)
        if rewritten is None:
            return False
        self.text = rewritten + self.text[self.cursor :]
        self.cursor = len(rewritten)
        return True

    def make_composer(self, **kwargs) -> Composer:
        return Composer(self.insert, self.backspace, **kwargs)


class WriterSurface:
    """Wires a TextBuffer to its own Composer, the way each keyboard surface does."""

    def __init__(self, buffer: typing.Optional[TextBuffer] = None, **composer_kwargs):
        self.buffer = TextBuffer() if buffer is None else buffer
        self.composer = self.buffer.make_composer(**composer_kwargs)

    @property
    def text(self):
        return self.buffer.text

    def handle_key_event(self, event: KeyEvent) -> bool:
        if (
            event.is_press
            and event.key is Key.CHARACTER
            and not self.composer.selector.active
            and self.buffer.apply_bracket(event.character)
        ):
            logger.debug("Applied bracket accent %r", event.character)
            return True
        return self.composer.handle_key_event(event)
