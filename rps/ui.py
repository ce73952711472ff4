from rps.game.models import Move, Name, Outcome


WELCOME = "Welcome to Rock Paper Scissors"
NAME_PROMPT = "What is your name > "
MOVE_PROMPT = "\nR(ock), P(aper), or S(cissors) > "
REPLAY_PROMPT = "Do you want to play again (y/[n]) > "

BAD_MOVE = 'Please type one of "Rock", "Paper", or "Scissors".'
GAVE_UP = "You are really bad at instructions"
BAD_ANSWER = "It is a simple yes or no question, and yet you still screwed that up."
FAREWELL = "\nThanks for playing!"


def greeting(name: Name) -> str:
    return f"Hello {name}"


def chosen_moves(name: Name, player: Move, cpu: Move) -> str:
    return f"\n{name} chose: {player}\nComputer chose: {cpu}\n"


def outcome_line(outcome: Outcome, player: Move, cpu: Move) -> str:
    if outcome == Outcome.WIN:
        return f"You win! {player} beats {cpu}"
    if outcome == Outcome.LOSE:
        return f"AI won! {cpu} beats {player}"
    return "It's a Tie!"


def score_line(rounds: int, player_score: int, cpu_score: int, ties: int) -> str:
    played = "round" if rounds == 1 else "rounds"
    return f"\n{rounds} {played} played. You {player_score} : {cpu_score} Computer, {ties} tied."
