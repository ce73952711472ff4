from enum import Enum, auto


class SessionState(Enum):
    AWAIT_NAME = auto()
    AWAIT_MOVE = auto()
    SHOW_RESULT = auto()
    AWAIT_REPLAY = auto()
    TERMINATE = auto()
