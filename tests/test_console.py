from rps.console import Console


def _raise(exc):
    def reader(prompt):
        raise exc
    return reader


def test_ask_strips_line():
    assert Console(reader=lambda p: "  Brian \n").ask("> ") == "Brian"


def test_ask_empty_line_is_none():
    assert Console(reader=lambda p: "   ").ask("> ") is None


def test_ask_read_failures_are_none():
    for exc in (EOFError(), KeyboardInterrupt(), OSError("broken"), ValueError("closed file")):
        assert Console(reader=_raise(exc)).ask("> ") is None


def test_default_streams(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "rock")
    console = Console()
    assert console.ask("> ") == "rock"
    console.say("hi")
    assert capsys.readouterr().out == "hi\n"
