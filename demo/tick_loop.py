"""Small simulated application driving a dispatcher once per tick."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from core import BaseEvent, Dispatcher

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class TickStarted(BaseEvent):
    tick: int


@dataclass(slots=True)
class PlayerDamaged(BaseEvent):
    player: str
    amount: int


@dataclass(slots=True)
class PlayerDefeated(BaseEvent):
    player: str
    tick: int


@dataclass
class Scoreboard:
    """Listener state updated from queued damage events."""

    health: int = 30
    defeated: List[str] = field(default_factory=list)
    log: List[str] = field(default_factory=list)
    _dispatcher: Optional[Dispatcher] = field(default=None, init=False, repr=False)
    _tick: int = field(default=0, init=False, repr=False)

    def attach(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher
        dispatcher.subscribe(TickStarted, self.on_tick)
        dispatcher.subscribe(PlayerDamaged, self.on_damage)
        dispatcher.subscribe(PlayerDefeated, self.on_defeat)

    def on_tick(self, event: TickStarted) -> None:
        self._tick = event.tick
        self.log.append(f"tick {event.tick}")

    def on_damage(self, event: PlayerDamaged) -> None:
        self.health -= event.amount
        self.log.append(f"{event.player} -{event.amount} ({self.health})")
        if self.health <= 0 and event.player not in self.defeated and self._dispatcher is not None:
            # Delivered by the same drain that handled the damage.
            self._dispatcher.enqueue(PlayerDefeated(player=event.player, tick=self._tick))

    def on_defeat(self, event: PlayerDefeated) -> None:
        self.defeated.append(event.player)
        self.log.append(f"{event.player} defeated at tick {event.tick}")


def run_ticks(dispatcher: Dispatcher, ticks: int, damage: int = 7) -> Scoreboard:
    """Run ``ticks`` iterations: publish the tick, queue damage, then drain."""

    board = Scoreboard()
    board.attach(dispatcher)
    for tick in range(1, ticks + 1):
        dispatcher.publish(TickStarted(tick=tick))
        dispatcher.enqueue(PlayerDamaged(player="hero", amount=damage))
        drained = dispatcher.drain_queue()
        LOGGER.info("Tick %s drained %s event(s), health=%s", tick, drained, board.health)
    return board
