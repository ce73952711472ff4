import logging
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class Console:
    """Blocking line I/O. A failed or empty read is just "no input"."""

    def __init__(
        self,
        reader: Optional[Callable[[str], str]] = None,
        writer: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._reader = reader or input
        self._writer = writer or print

    def ask(self, prompt: str) -> Optional[str]:
        try:
            raw = self._reader(prompt)
        except (EOFError, KeyboardInterrupt, OSError, ValueError) as e:
            logger.debug("read failed after %r: %r", prompt, e)
            return None
        raw = raw.strip()
        return raw or None

    def say(self, text: str = "") -> None:
        self._writer(text)
