"""
Game configuration settings.
"""

import os
from dataclasses import dataclass

from dicewars.constants import (
    BUTTON_LABEL,
    CELL_MARGIN,
    DICE_FACES,
    FIELD_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from dicewars.dice import DiceMode
from dicewars.geometry import PixelMapping


@dataclass
class GameSettings:
    """Game configuration."""

    # Board
    field_size: int = FIELD_SIZE
    cell_margin: float = CELL_MARGIN

    # Dice
    dice_faces: int = DICE_FACES
    dice_mode: DiceMode = DiceMode.INDEPENDENT

    # Input
    pixel_mapping: PixelMapping = PixelMapping.SYMMETRIC

    # Window
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    button_label: str = BUTTON_LABEL

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.field_size < 1:
            raise ValueError(f"field_size must be positive, got {self.field_size}")
        if self.cell_margin < 0:
            raise ValueError(f"cell_margin must not be negative, got {self.cell_margin}")
        if self.dice_faces < 1:
            raise ValueError(f"dice_faces must be positive, got {self.dice_faces}")


def _enum_from_env(name: str, enum_cls, default):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return enum_cls[raw.strip().upper()]
    except KeyError:
        choices = ", ".join(member.name.lower() for member in enum_cls)
        raise ValueError(f"{name}={raw!r} is not one of: {choices}") from None


def load_settings() -> GameSettings:
    """Load settings from environment variables."""
    return GameSettings(
        field_size=int(os.getenv("DICEWARS_FIELD_SIZE", str(FIELD_SIZE))),
        cell_margin=float(os.getenv("DICEWARS_CELL_MARGIN", str(CELL_MARGIN))),
        dice_faces=int(os.getenv("DICEWARS_DICE_FACES", str(DICE_FACES))),
        dice_mode=_enum_from_env("DICEWARS_DICE_MODE", DiceMode, DiceMode.INDEPENDENT),
        pixel_mapping=_enum_from_env("DICEWARS_PIXEL_MAPPING", PixelMapping, PixelMapping.SYMMETRIC),
        window_width=int(os.getenv("DICEWARS_WINDOW_WIDTH", str(WINDOW_WIDTH))),
        window_height=int(os.getenv("DICEWARS_WINDOW_HEIGHT", str(WINDOW_HEIGHT))),
        log_level=os.getenv("DICEWARS_LOG_LEVEL", "INFO").upper(),
    )
