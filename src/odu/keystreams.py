# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
from contextlib import aclosing, asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterable, cast

import trio

from .composer import Composer
from .events import Backspaced, ComposerOutput, ComposerStatus, Emitted, KeyEvent, KeyPress
from .keyboard_consts import Key

if TYPE_CHECKING:
    from .composer.selector import ToneCue
    from .settings import Settings


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 1: drop autorepeat of everything but Shift, which the modifier tracker wants to see
class DropRepeats(Section):
    async def pump(self, source: trio.MemoryReceiveChannel[KeyEvent], sink: trio.MemorySendChannel[KeyEvent]):
        async with aclosing(source), aclosing(sink):
            async for event in source:
                if event.press is KeyPress.REPEATED and event.key is not Key.SHIFT:
                    continue
                await sink.send(event)


# stage 2: run each event through a Composer and publish what came out
class ComposeTones(Section):
    def __init__(self, settings: Settings, cue: ToneCue | None = None):
        self.pending: list[ComposerOutput] = []
        kwargs = {} if cue is None else {"cue": cue}
        self.composer = Composer(self._emit, self._backspace, settings=settings, **kwargs)

    def _emit(self, text: str):
        self.pending.append(Emitted(text=text))

    def _backspace(self):
        self.pending.append(Backspaced())

    def status(self):
        return ComposerStatus(
            effective_shift=self.composer.effective_shift,
            tone_mode_active=self.composer.tone_mode_active,
            selection=self.composer.selection,
        )

    async def pump(self, source: trio.MemoryReceiveChannel[KeyEvent], sink: trio.MemorySendChannel[ComposerOutput]):
        async with aclosing(source), aclosing(sink):
            last_status = self.status()
            async for event in source:
                self.composer.handle_key_event(event)
                outputs, self.pending = self.pending, []
                for output in outputs:
                    await sink.send(output)
                status = self.status()
                if status != last_status:
                    await sink.send(status)
                    last_status = status


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()


@asynccontextmanager
async def make_keystream(
    key_event_channel: trio.MemoryReceiveChannel[KeyEvent],
    settings: Settings,
    cue: ToneCue | None = None,
):
    sections = [
        DropRepeats(),
        ComposeTones(settings, cue),
    ]

    async with pump_all(key_event_channel, *sections) as keystream:
        yield cast(trio.MemoryReceiveChannel[ComposerOutput], keystream)
