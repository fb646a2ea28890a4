# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import typing
from contextlib import aclosing
from datetime import timedelta

import pytest
import trio
from odu.composer import ToneSelection
from odu.events import Backspaced, ComposerStatus, Emitted, KeyEvent, KeyPress
from odu.keyboard_consts import Key
from odu.keystreams import ComposeTones, DropRepeats, make_keystream, pump_all
from odu.settings import Settings
from trio.lowlevel import checkpoint

T = typing.TypeVar("T")


async def make_async_source(
    items: collections.abc.Sequence[T],
):
    for item in items:
        await checkpoint()
        yield item


def ms(value):
    return timedelta(milliseconds=value)


@pytest.mark.trio
async def test_drop_repeats():
    async with (
        aclosing(
            make_async_source(
                [
                    KeyEvent(key=Key.CHARACTER, press=KeyPress.PRESSED, character="a"),
                    KeyEvent(key=Key.CHARACTER, press=KeyPress.REPEATED, character="a"),
                    KeyEvent(key=Key.CHARACTER, press=KeyPress.RELEASED, character="a"),
                    KeyEvent(key=Key.SHIFT, press=KeyPress.PRESSED),
                    KeyEvent(key=Key.SHIFT, press=KeyPress.REPEATED),
                    KeyEvent(key=Key.SHIFT, press=KeyPress.RELEASED),
                ]
            )
        ) as keysource,
        pump_all(keysource, DropRepeats()) as resultsource,
    ):
        results = [event async for event in resultsource]
        assert results == [
            KeyEvent(key=Key.CHARACTER, press=KeyPress.PRESSED, character="a"),
            KeyEvent(key=Key.CHARACTER, press=KeyPress.RELEASED, character="a"),
            KeyEvent(key=Key.SHIFT, press=KeyPress.PRESSED),
            KeyEvent(key=Key.SHIFT, press=KeyPress.REPEATED),
            KeyEvent(key=Key.SHIFT, press=KeyPress.RELEASED),
        ]


@pytest.mark.trio
async def test_compose_tones():
    async with (
        aclosing(
            make_async_source(
                [
                    KeyEvent.typed("b"),
                    KeyEvent.pressed(Key.SHIFT, ms(0)),
                    KeyEvent.released(Key.SHIFT, ms(50)),
                    KeyEvent.pressed(Key.SHIFT, ms(150)),
                    KeyEvent.released(Key.SHIFT, ms(200)),
                    KeyEvent.typed("a", ms(400)),
                    KeyEvent.pressed(Key.ARROW_LEFT, ms(500)),
                    KeyEvent.pressed(Key.ENTER, ms(600)),
                    KeyEvent.pressed(Key.BACKSPACE, ms(700)),
                ]
            )
        ) as keysource,
        pump_all(keysource, ComposeTones(Settings.for_test())) as resultsource,
    ):
        results = [output async for output in resultsource]
        assert results == [
            Emitted(text="b"),
            ComposerStatus(effective_shift=True, tone_mode_active=False, selection=None),
            ComposerStatus(effective_shift=False, tone_mode_active=False, selection=None),
            ComposerStatus(effective_shift=True, tone_mode_active=True, selection=None),
            ComposerStatus(effective_shift=False, tone_mode_active=True, selection=None),
            ComposerStatus(
                effective_shift=False, tone_mode_active=False, selection=ToneSelection(pending_key="a", cursor_index=1)
            ),
            ComposerStatus(
                effective_shift=False, tone_mode_active=False, selection=ToneSelection(pending_key="a", cursor_index=0)
            ),
            Emitted(text="à"),
            ComposerStatus(effective_shift=False, tone_mode_active=False, selection=None),
            Backspaced(),
        ]


@pytest.mark.trio
async def test_make_keystream():
    cues = []
    send_channel, receive_channel = trio.open_memory_channel(0)

    async def feed():
        async with send_channel:
            for event in [
                KeyEvent.pressed(Key.FN),
                KeyEvent.typed("o"),
                KeyEvent.typed("3"),
                KeyEvent.typed("k"),
            ]:
                await send_channel.send(event)

    async with trio.open_nursery() as nursery:
        nursery.start_soon(feed)
        async with make_keystream(receive_channel, Settings.for_test(), cue=cues.append) as keystream:
            emitted = [output.text async for output in keystream if isinstance(output, Emitted)]

    assert emitted == ["ó", "k"]
    assert cues == [1]
