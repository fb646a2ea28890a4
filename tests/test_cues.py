from datetime import timedelta

import numpy as np
import pytest

from odu.composer import Composer
from odu.cues import SAMPLE_RATE, SineCue, sine_wave
from odu.settings import Settings


def dominant_frequency(samples, sample_rate=SAMPLE_RATE):
    spectrum = np.abs(np.fft.rfft(samples))
    freqs = np.fft.rfftfreq(len(samples), 1 / sample_rate)
    return freqs[np.argmax(spectrum)]


def test_sine_wave_shape():
    samples = sine_wave(261.63, timedelta(milliseconds=400))
    assert samples.dtype == np.float32
    assert len(samples) == int(0.4 * SAMPLE_RATE)
    assert np.max(np.abs(samples)) <= 0.2 + 1e-6
    # decays towards silence
    assert np.max(np.abs(samples[-100:])) < np.max(np.abs(samples[:1000]))


def test_pitch_rises_with_tone():
    played = []
    cue = SineCue.from_settings(lambda samples, rate: played.append(samples), Settings.for_test())
    for index in range(3):
        cue(index)
    peaks = [dominant_frequency(samples) for samples in played]
    assert peaks[0] < peaks[1] < peaks[2]
    assert peaks[0] == pytest.approx(261.63, abs=5)


def test_samples_are_cached():
    cue = SineCue(lambda samples, rate: None, [100.0, 200.0, 300.0], timedelta(milliseconds=50))
    assert cue.samples_for(1) is cue.samples_for(1)


def test_composer_plays_cues():
    played = []
    cue = SineCue(lambda samples, rate: played.append(rate), [100.0, 200.0, 300.0], timedelta(milliseconds=10))
    composer = Composer(lambda char: None, cue=cue)
    composer.press_mode_key()
    composer.press_character("a")
    composer.move_next()
    assert played == [SAMPLE_RATE, SAMPLE_RATE]
