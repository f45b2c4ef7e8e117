"""Game state resource shared by the systems."""
from dataclasses import dataclass

from dicewars.components.player import Player


@dataclass
class GameState:
    """Singleton component tracking whose turn it is.

    ``current_player`` is never advanced yet; turn handling is an open
    extension point.
    """
    current_player: Player = Player.PLAYER_1
