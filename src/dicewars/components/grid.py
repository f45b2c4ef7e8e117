from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from dicewars.components.player import Player

CellOwner = Optional[Player]


@dataclass(slots=True)
class Grid:
    """Square board of cell owners indexed as ``owners[i][j]``.

    ``i`` runs along the canvas x axis and ``j`` along the y axis. The side
    length is fixed at construction; every cell starts unowned.
    """

    size: int
    owners: List[List[CellOwner]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"grid size must be positive, got {self.size}")
        if not self.owners:
            self.owners = [[None] * self.size for _ in range(self.size)]

    def in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self.size and 0 <= j < self.size

    def owner_at(self, i: int, j: int) -> CellOwner:
        return self.owners[i][j]

    def cells(self) -> Iterator[Tuple[int, int, CellOwner]]:
        for i, column in enumerate(self.owners):
            for j, owner in enumerate(column):
                yield i, j, owner
