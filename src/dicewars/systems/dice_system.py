import logging

from esper import World

from dicewars.components.dice_state import DiceState
from dicewars.constants import DICE_FACES
from dicewars.dice import DiceMode, DiceRoll, DiceRoller
from dicewars.events.bus import EventBus, EVENT_DICE_ROLL_REQUEST, EVENT_DICE_ROLLED

logger = logging.getLogger(__name__)


class DiceSystem:
    """Throws the dice on request and stores the result in ``DiceState``."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        mode: DiceMode = DiceMode.INDEPENDENT,
        faces: int = DICE_FACES,
        roller: DiceRoller | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.roller = roller or DiceRoller(mode=mode, faces=faces, rng=getattr(world, "random", None))
        self.event_bus.subscribe(EVENT_DICE_ROLL_REQUEST, self.on_roll_request)

    def on_roll_request(self, sender, **kwargs):
        source = kwargs.get('source', 'unknown')
        state = self._state()
        if state is None:
            logger.warning("Roll requested without a DiceState in the world")
            return
        roll = self.roller.roll()
        state.last_roll = roll
        state.rolls += 1
        logger.info("Rolled %d and %d (%s)", roll.die1, roll.die2, source)
        self.event_bus.emit(EVENT_DICE_ROLLED, die1=roll.die1, die2=roll.die2, source=source)

    def last_roll(self) -> DiceRoll | None:
        state = self._state()
        return state.last_roll if state else None

    def _state(self) -> DiceState | None:
        for _, state in self.world.get_component(DiceState):
            return state
        return None
