from enum import Enum, auto


class Event(Enum):
    NAME_ENTERED = auto()
    MOVE_CHOSEN = auto()
    MOVE_REJECTED = auto()
    RESOLVE = auto()
    REPLAY = auto()
    DECLINE = auto()
    ANSWER_REJECTED = auto()
