import logging

from esper import World

from dicewars.components.grid import Grid
from dicewars.components.player import Player
from dicewars.constants import FIELD_SIZE
from dicewars.events.bus import EventBus, EVENT_CELL_OWNER_CHANGE, EVENT_CELL_OWNER_CHANGED

logger = logging.getLogger(__name__)


class GridSystem:
    """Owns the board entity and applies owner-change requests.

    Nothing in the game currently requests owner changes; the handler keeps
    the board consistent for whoever does.
    """

    def __init__(self, world: World, event_bus: EventBus, size: int = FIELD_SIZE):
        self.world = world
        self.event_bus = event_bus
        self.grid_entity = self.world.create_entity(Grid(size=size))
        self.event_bus.subscribe(EVENT_CELL_OWNER_CHANGE, self.on_owner_change)

    @property
    def grid(self) -> Grid:
        return self.world.component_for_entity(self.grid_entity, Grid)

    def on_owner_change(self, sender, **kwargs):
        player = kwargs.get('player')
        i = kwargs.get('i')
        j = kwargs.get('j')
        if not isinstance(player, Player) or not _is_index(i) or not _is_index(j):
            logger.warning("Ignoring malformed owner change: %r", kwargs)
            return
        grid = self.grid
        if not grid.in_bounds(i, j):
            logger.warning("Ignoring owner change outside the board: (%s, %s)", i, j)
            return
        previous = grid.owners[i][j]
        if previous is player:
            return
        grid.owners[i][j] = player
        logger.debug("Cell (%d, %d) now owned by %s", i, j, player.name)
        self.event_bus.emit(EVENT_CELL_OWNER_CHANGED, player=player, i=i, j=j, previous=previous)


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
