from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from rps import ui
from rps.config import GameConfig
from rps.console import Console
from rps.game.events import Event
from rps.game.models import Move, Name, Outcome
from rps.game.rules import judge, random_move
from rps.game.states import SessionState


logger = logging.getLogger(__name__)


@dataclass
class SessionContext:
    config: GameConfig = field(default_factory=GameConfig)
    name: Name = field(default_factory=Name)
    attempts: int = 0
    rounds: int = 0
    player_score: int = 0
    cpu_score: int = 0
    ties: int = 0
    last_player_move: Optional[Move] = None
    last_cpu_move: Optional[Move] = None
    last_outcome: Optional[Outcome] = None


class FSM:
    def __init__(
        self,
        initial: SessionState,
        context: SessionContext,
        console: Console,
        opponent: Callable[[], Move],
    ) -> None:
        self.state: SessionState = initial
        self.ctx: SessionContext = context
        self.console: Console = console
        self.opponent: Callable[[], Move] = opponent
        self._table: Dict[Tuple[SessionState, Event], Callable[..., SessionState]] = {}

    def on(self, state: SessionState, event: Event):
        def decorator(fn: Callable[..., SessionState]):
            self._table[(state, event)] = fn
            return fn
        return decorator

    def send(self, event: Event, **kwargs) -> None:
        handler = self._table.get((self.state, event))
        if not handler:
            logger.debug("no transition: %s --%s--> ?", self.state.name, event.name)
            return
        new_state = handler(self, **kwargs)
        logger.debug("%s --%s--> %s", self.state.name, event.name, new_state.name)
        self.state = new_state


def build_session(
    config: Optional[GameConfig] = None,
    console: Optional[Console] = None,
    rng: Optional[random.Random] = None,
) -> FSM:
    """Wire the name -> move -> result -> replay loop."""
    ctx = SessionContext(config=config or GameConfig())
    fsm = FSM(
        SessionState.AWAIT_NAME,
        ctx,
        console or Console(),
        lambda: random_move(rng),
    )

    @fsm.on(SessionState.AWAIT_NAME, Event.NAME_ENTERED)
    def name_entered(self: FSM, raw: Optional[str]) -> SessionState:
        self.ctx.name = Name.parse(raw)
        self.console.say(ui.greeting(self.ctx.name))
        return SessionState.AWAIT_MOVE

    @fsm.on(SessionState.AWAIT_MOVE, Event.MOVE_CHOSEN)
    def move_chosen(self: FSM, move: Move) -> SessionState:
        self.ctx.attempts = 0
        self.ctx.last_player_move = move
        self.ctx.last_cpu_move = self.opponent()
        return SessionState.SHOW_RESULT

    @fsm.on(SessionState.AWAIT_MOVE, Event.MOVE_REJECTED)
    def move_rejected(self: FSM) -> SessionState:
        self.console.say(ui.BAD_MOVE)
        self.ctx.attempts += 1
        if self.ctx.attempts >= self.ctx.config.max_attempts:
            self.console.say(ui.GAVE_UP)
            return SessionState.TERMINATE
        return SessionState.AWAIT_MOVE

    @fsm.on(SessionState.SHOW_RESULT, Event.RESOLVE)
    def show_result(self: FSM) -> SessionState:
        player, cpu = self.ctx.last_player_move, self.ctx.last_cpu_move
        outcome = judge(player, cpu)
        self.ctx.last_outcome = outcome
        self.ctx.rounds += 1
        if outcome == Outcome.WIN:
            self.ctx.player_score += 1
        elif outcome == Outcome.LOSE:
            self.ctx.cpu_score += 1
        else:
            self.ctx.ties += 1

        self.console.say(ui.chosen_moves(self.ctx.name, player, cpu))
        self.console.say(ui.outcome_line(outcome, player, cpu))
        return SessionState.AWAIT_REPLAY

    @fsm.on(SessionState.AWAIT_REPLAY, Event.REPLAY)
    def replay(self: FSM) -> SessionState:
        return SessionState.AWAIT_MOVE

    @fsm.on(SessionState.AWAIT_REPLAY, Event.DECLINE)
    def decline(self: FSM) -> SessionState:
        return SessionState.TERMINATE

    @fsm.on(SessionState.AWAIT_REPLAY, Event.ANSWER_REJECTED)
    def answer_rejected(self: FSM) -> SessionState:
        self.console.say(ui.BAD_ANSWER)
        return SessionState.TERMINATE

    return fsm
