from dataclasses import dataclass

from dicewars.constants import BUTTON_HEIGHT, BUTTON_WIDTH


@dataclass
class RollButton:
    """Clickable button that throws the dice. ``x``/``y`` is the centre."""
    label: str
    x: float
    y: float
    width: float = BUTTON_WIDTH
    height: float = BUTTON_HEIGHT

    def contains(self, px: float, py: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            self.x - half_w <= px <= self.x + half_w
            and self.y - half_h <= py <= self.y + half_h
        )
