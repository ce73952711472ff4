
from rps.console import Console


class ScriptedIO:
    """Feeds canned lines to the game and records everything it prints."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.out = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def console(self):
        return Console(reader=self.read, writer=self.out.append)


class FixedRng:
    def __init__(self, *indices):
        self.indices = list(indices)

    def randrange(self, n):
        return self.indices.pop(0)
