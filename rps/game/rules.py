import logging
import random
from typing import Optional

from rps.game.models import Move, Outcome


logger = logging.getLogger(__name__)


class InvariantViolation(RuntimeError):
    """The three-move invariant is broken. Nothing sensible to recover to."""


wins = {
    Move.PAPER: Move.ROCK,
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
}

_BY_INDEX = {
    0: Move.ROCK,
    1: Move.PAPER,
    2: Move.SCISSORS,
}


def beats(a: Move, b: Move) -> bool:
    return wins[a] == b


def random_move(rng: Optional[random.Random] = None) -> Move:
    idx = (rng or random).randrange(3)
    move = _BY_INDEX.get(idx)
    if move is None:
        raise InvariantViolation(f"random source produced move index {idx!r}")
    logger.debug("computer picked %s", move.value)
    return move


def judge(player: Move, cpu: Move) -> Outcome:
    win = beats(player, cpu)
    lose = beats(cpu, player)
    if win and lose:
        raise InvariantViolation(f"{player.value} and {cpu.value} beat each other")
    if win:
        return Outcome.WIN
    if lose:
        return Outcome.LOSE
    return Outcome.TIE
