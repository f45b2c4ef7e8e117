"""Dice throwing.

Two generation modes are supported. ``BYTE_SPLIT`` draws a single random
byte and derives both dice from it, matching the first prototype including
its bias towards low faces. ``INDEPENDENT`` draws each die uniformly.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from dicewars.constants import DICE_FACES


@dataclass(frozen=True, slots=True)
class DiceRoll:
    """Result of throwing two dice; the extent of the highlighted region."""
    die1: int
    die2: int

    def as_tuple(self) -> Tuple[int, int]:
        return self.die1, self.die2


class DiceMode(Enum):
    BYTE_SPLIT = auto()
    INDEPENDENT = auto()


def dice_from_byte(value: int, faces: int = DICE_FACES) -> DiceRoll:
    """Derive both dice from one byte: high nibble for die 1, whole byte for die 2."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"expected a byte, got {value}")
    return DiceRoll(die1=(value >> 4) % faces + 1, die2=value % faces + 1)


class DiceRoller:
    """Throws two dice with a seedable random source."""

    def __init__(
        self,
        mode: DiceMode = DiceMode.INDEPENDENT,
        faces: int = DICE_FACES,
        rng: random.Random | None = None,
    ):
        if faces < 1:
            raise ValueError(f"dice need at least one face, got {faces}")
        self.mode = mode
        self.faces = faces
        self._random = rng or random.Random()

    def roll(self) -> DiceRoll:
        if self.mode is DiceMode.BYTE_SPLIT:
            return dice_from_byte(self._random.getrandbits(8), self.faces)
        return DiceRoll(
            die1=self._random.randint(1, self.faces),
            die2=self._random.randint(1, self.faces),
        )
