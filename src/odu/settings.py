import dataclasses
import datetime
import enum
import json
import pathlib
import typing

import cattrs
from cattrs.errors import BaseValidationError

from .commontypes import SettingsError
from .durations import format_duration, parse_duration


class ToneModePolicy(enum.Enum):
    # disarm on the first printable keystroke that does not open a tone selection
    CLEAR_ON_MISS = "clear_on_miss"
    # stay armed until a tonal letter arrives or Escape is pressed
    PERSIST = "persist"


class ReentryPolicy(enum.Enum):
    # what happens to a pending tone selection when another printable key arrives
    CONFIRM = "confirm"
    CANCEL = "cancel"


DEFAULT_TONE_FREQUENCIES = [261.63, 293.66, 329.63]  # C4, D4, E4: Do, Re, Mi


def _default_frequencies():
    return list(DEFAULT_TONE_FREQUENCIES)


def _default_digit_keys():
    return ["1", "2", "3"]


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(datetime.timedelta, format_duration)
settings_converter.register_structure_hook(datetime.timedelta, lambda d, _: parse_duration(d))


@dataclasses.dataclass(kw_only=True)
class Settings:
    double_press_min: datetime.timedelta = datetime.timedelta(milliseconds=20)
    double_press_max: datetime.timedelta = datetime.timedelta(milliseconds=350)
    tone_mode_policy: ToneModePolicy = ToneModePolicy.CLEAR_ON_MISS
    reentry_policy: ReentryPolicy = ReentryPolicy.CONFIRM
    tone_frequencies: list[float] = dataclasses.field(default_factory=_default_frequencies)
    cue_duration: datetime.timedelta = datetime.timedelta(milliseconds=400)
    digit_keys: list[str] = dataclasses.field(default_factory=_default_digit_keys)

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.double_press_min < datetime.timedelta():
            raise SettingsError("double_press_min must not be negative")
        if self.double_press_min >= self.double_press_max:
            raise SettingsError("double_press_min must be shorter than double_press_max")
        if len(self.tone_frequencies) != 3:
            raise SettingsError("tone_frequencies needs exactly one frequency per tone")
        low, mid, high = self.tone_frequencies
        if not 0 < low < mid < high:
            raise SettingsError("tone_frequencies must be positive and ascend from low to high tone")
        if self.cue_duration <= datetime.timedelta():
            raise SettingsError("cue_duration must be positive")
        if len(self.digit_keys) != 3 or len(set(self.digit_keys)) != 3 or any(len(k) != 1 for k in self.digit_keys):
            raise SettingsError("digit_keys needs three distinct single characters")
        return self

    def to_dict(self) -> dict[str, typing.Any]:
        return settings_converter.unstructure(self)

    @classmethod
    def from_dict(cls, raw: dict[str, typing.Any]):
        try:
            return settings_converter.structure(raw, cls)
        except (BaseValidationError, ValueError, TypeError) as exc:
            raise SettingsError(f"Invalid settings: {exc}") from exc

    def save(self, dest: pathlib.Path):
        with dest.open("w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as f:
            raw = json.load(f)
        return cls.from_dict(raw)

    @classmethod
    def for_test(cls):
        return cls.from_dict({})
