from dataclasses import dataclass
from typing import Optional

from dicewars.dice import DiceRoll


@dataclass(slots=True)
class DiceState:
    """Holds the most recent roll; replaced wholesale on every throw."""

    last_roll: Optional[DiceRoll] = None
    rolls: int = 0
