# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Audible feedback for the tone picker.

Each cursor position gets a note of its own, rising with the tone: Do for low, Re for mid, Mi
for high. The library only synthesizes the samples; getting them to a speaker is the host's job,
through the ``play`` callable handed to SineCue.
"""
from __future__ import annotations

import collections.abc
import datetime
import typing

import numpy as np

if typing.TYPE_CHECKING:
    from .settings import Settings

SAMPLE_RATE = 44100
VOLUME = 0.2
# the envelope decays exponentially down to this gain by the end of the note
FLOOR_GAIN = 0.0001

SamplePlayer = collections.abc.Callable[[np.ndarray, int], None]


def sine_wave(
    frequency: float,
    duration: datetime.timedelta,
    sample_rate: int = SAMPLE_RATE,
    volume: float = VOLUME,
) -> np.ndarray:
    count = int(round(duration.total_seconds() * sample_rate))
    t = np.arange(count, dtype=np.float32) / sample_rate
    envelope = volume * np.power(FLOOR_GAIN / volume, t / max(duration.total_seconds(), 1e-9))
    return (envelope * np.sin(2 * np.pi * frequency * t)).astype(np.float32)


class SineCue:
    def __init__(
        self,
        play: SamplePlayer,
        frequencies: collections.abc.Sequence[float],
        duration: datetime.timedelta,
        sample_rate: int = SAMPLE_RATE,
    ):
        self.play = play
        self.frequencies = list(frequencies)
        self.duration = duration
        self.sample_rate = sample_rate
        self._cache: dict[int, np.ndarray] = {}

    @classmethod
    def from_settings(cls, play: SamplePlayer, settings: Settings):
        return cls(play, settings.tone_frequencies, settings.cue_duration)

    def samples_for(self, index: int) -> np.ndarray:
        if index not in self._cache:
            self._cache[index] = sine_wave(self.frequencies[index], self.duration, self.sample_rate)
        return self._cache[index]

    def __call__(self, index: int):
        self.play(self.samples_for(index), self.sample_rate)
