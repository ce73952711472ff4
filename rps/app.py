import random
from typing import Optional

from rps import ui
from rps.config import GameConfig
from rps.console import Console
from rps.game.events import Event
from rps.game.models import Answer, Move
from rps.game.states import SessionState
from rps.game.transitions import FSM, build_session


def build_app(
    config: Optional[GameConfig] = None,
    console: Optional[Console] = None,
    rng: Optional[random.Random] = None,
) -> FSM:
    config = config or GameConfig()
    if rng is None and config.seed is not None:
        rng = random.Random(config.seed)
    return build_session(config, console, rng)


def run(fsm: FSM) -> None:
    console = fsm.console
    console.say(ui.WELCOME)

    while fsm.state != SessionState.TERMINATE:
        if fsm.state == SessionState.AWAIT_NAME:
            fsm.send(Event.NAME_ENTERED, raw=console.ask(ui.NAME_PROMPT))

        elif fsm.state == SessionState.AWAIT_MOVE:
            mv = Move.from_input(console.ask(ui.MOVE_PROMPT))
            if mv is None:
                fsm.send(Event.MOVE_REJECTED)
            else:
                fsm.send(Event.MOVE_CHOSEN, move=mv)

        elif fsm.state == SessionState.SHOW_RESULT:
            fsm.send(Event.RESOLVE)

        elif fsm.state == SessionState.AWAIT_REPLAY:
            answer = Answer.from_input(console.ask(ui.REPLAY_PROMPT))
            if answer == Answer.YES:
                fsm.send(Event.REPLAY)
            elif answer == Answer.NO:
                fsm.send(Event.DECLINE)
            else:
                fsm.send(Event.ANSWER_REJECTED)

    ctx = fsm.ctx
    if ctx.rounds:
        console.say(ui.score_line(ctx.rounds, ctx.player_score, ctx.cpu_score, ctx.ties))
    console.say(ui.FAREWELL)
