# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from .composer import Composer
from .modifiers import ModifierState, ModifierTracker
from .resolver import Action, EmitChar, NoOp, OpenToneSelection, PendingLetterResolver
from .selector import ToneSelection, ToneSelector

__all__ = [
    "Action",
    "Composer",
    "EmitChar",
    "ModifierState",
    "ModifierTracker",
    "NoOp",
    "OpenToneSelection",
    "PendingLetterResolver",
    "ToneSelection",
    "ToneSelector",
]
