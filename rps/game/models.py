from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError


ANON = "Anon"
NAME_PATTERN = r"^[A-Za-z]+$"


class Move(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    def __str__(self) -> str:
        return self.value.capitalize()

    @staticmethod
    def from_input(s: Optional[str]) -> Optional["Move"]:
        """Full word or first letter, any case. None when nothing matches."""
        if s is None:
            return None
        for move, pattern in _MOVE_PATTERNS:
            if pattern.fullmatch(s):
                return move
        return None


class Answer(Enum):
    YES = "yes"
    NO = "no"

    @staticmethod
    def from_input(s: Optional[str]) -> Optional["Answer"]:
        if s is None:
            return None
        for answer, pattern in _ANSWER_PATTERNS:
            if pattern.fullmatch(s):
                return answer
        return None


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


_FLAGS = re.IGNORECASE | re.ASCII

# order matters: rock, then paper, then scissors
_MOVE_PATTERNS = (
    (Move.ROCK, re.compile(r"r(ock)?", _FLAGS)),
    (Move.PAPER, re.compile(r"p(aper)?", _FLAGS)),
    (Move.SCISSORS, re.compile(r"s(cissors)?", _FLAGS)),
)

_ANSWER_PATTERNS = (
    (Answer.YES, re.compile(r"y(es)?", _FLAGS)),
    (Answer.NO, re.compile(r"n(o)?", _FLAGS)),
)


class Name(BaseModel):
    """Player name: ASCII letters only, or nobody at all."""

    model_config = ConfigDict(frozen=True)

    value: Optional[Annotated[str, StringConstraints(pattern=NAME_PATTERN)]] = None

    @classmethod
    def parse(cls, raw: Optional[str]) -> "Name":
        try:
            return cls(value=raw)
        except ValidationError:
            return cls()

    @property
    def is_anonymous(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        return self.value if self.value is not None else ANON
