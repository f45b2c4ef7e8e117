from enum import Enum, auto


class Player(Enum):
    PLAYER_1 = auto()
    PLAYER_2 = auto()
