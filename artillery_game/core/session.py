"""Game session management decoupled from rendering concerns."""

from __future__ import annotations

import heapq
import itertools
import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from artillery_game.core.config import GameConfig
from artillery_game.core.game import (
    Command,
    EventKind,
    GameState,
    Phase,
    Transition,
    new_match,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class ScheduledEvent:
    """Timer entry ordered by due time, then by scheduling order."""

    due: float
    sequence: int
    kind: EventKind = field(compare=False)


class GameSession:
    """Own the current match and the timers that drive it.

    Everything happens on the caller's thread: commands are applied as they
    arrive and ``advance`` fires whichever scheduled events have come due.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.state: GameState = new_match(self.config, self.rng)
        self.clock = 0.0
        self.running = True
        self.matches_played = 1
        self._queue: List[ScheduledEvent] = []
        self._sequence = itertools.count()

    # ------------------------------------------------------------------
    # Properties
    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def pending_events(self) -> List[ScheduledEvent]:
        return sorted(self._queue)

    # ------------------------------------------------------------------
    # Input
    def handle(self, command: Command) -> GameState:
        transition = self.state.apply(command)
        self._commit(transition)
        return self.state

    # ------------------------------------------------------------------
    # Time
    def advance(self, dt: float) -> List[ScheduledEvent]:
        """Move the clock forward and fire every event that has come due."""

        if dt < 0:
            raise ValueError("time cannot run backwards")
        self.clock += dt
        fired: List[ScheduledEvent] = []
        while self._queue and self._queue[0].due <= self.clock:
            event = heapq.heappop(self._queue)
            fired.append(event)
            self._dispatch(event)
        return fired

    def run_until_idle(self, max_events: int = 100_000) -> Iterator[ScheduledEvent]:
        """Fire queued events back to back without waiting on a real clock."""

        for _ in range(max_events):
            if not self._queue:
                return
            event = heapq.heappop(self._queue)
            self.clock = max(self.clock, event.due)
            self._dispatch(event)
            yield event
        raise RuntimeError(f"session still busy after {max_events} events")

    # ------------------------------------------------------------------
    # Internal helpers
    def _dispatch(self, event: ScheduledEvent) -> None:
        if event.kind is EventKind.TICK:
            self._commit(self.state.tick(self.config.gravity))
            return
        if event.kind is EventKind.RESET:
            if self.state.phase is not Phase.MISSED:
                logger.debug("Ignoring stale reset event at t=%.2f", event.due)
                return
            aim = self.state.aim if self.config.preserve_aim else None
            self.state = new_match(self.config, self.rng, aim=aim)
            self.matches_played += 1
            logger.info("Match restarted after a miss (match #%d)", self.matches_played)

    def _commit(self, transition: Transition) -> None:
        self.state = transition.state
        if transition.quit:
            self.running = False
            self._queue.clear()
            return
        if transition.schedule is not None:
            event = ScheduledEvent(
                self.clock + transition.schedule.delay,
                next(self._sequence),
                transition.schedule.kind,
            )
            heapq.heappush(self._queue, event)


__all__ = ["GameSession", "ScheduledEvent"]
