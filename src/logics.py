import logging
from dataclasses import dataclass, replace
from typing import Tuple

from colorama import Fore, Style, init

from src.config import MAX_BONUS
from src.matching import fuzzy_match, near_miss
from src.utils import shuffled_order, to_flag

# Initialize colorama for Windows/Mac compatibility
init(autoreset=True)

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a move is made after the last player."""


@dataclass(frozen=True)
class QuizState:
    order: Tuple[int, ...]
    index: int = 0
    score: int = 0
    streak: int = 0
    revealed: int = 0


@dataclass(frozen=True)
class GuessResult:
    correct: bool
    player: dict
    bonus: int = 0
    near_miss: bool = False
    ignored: bool = False


@dataclass(frozen=True)
class Summary:
    score: int
    max_score: int
    streak: int
    answered: int


def new_game(players, rng=None):
    return QuizState(order=tuple(shuffled_order(len(players), rng)))


def is_finished(state):
    return state.index >= len(state.order)


def progress(state):
    if not state.order:
        return 1.0
    return min(state.index, len(state.order)) / len(state.order)


def current_player(state, players):
    if is_finished(state):
        raise GameOverError("No players left, start a new game")
    return players[state.order[state.index]]


def targets_for(player):
    return [player["name"], *player.get("aliases", [])]


def facts_for(player):
    return [
        (to_flag(player["country"]), "Country", player["country"]),
        ("🎯", "Position", player["position"]),
        ("🏟️", "Club", player["club"]),
    ]


def hints_for(player):
    """
    Progressive hints: initials, first letter of the surname, then the flag.
    """
    words = player["name"].split()
    return [
        "Initials: " + ".".join(w[0] for w in words) + ".",
        f"Surname starts with: {words[-1][0]}…",
        f"Flag: {to_flag(player['country'])}",
    ]


def _advance(state, **changes):
    return replace(state, index=state.index + 1, revealed=0, **changes)


def apply_hint(state, players):
    """
    Reveals the next hint. The first one is free, every later one costs a point.
    """
    hints = hints_for(current_player(state, players))
    idx = min(state.revealed, len(hints) - 1)
    score = max(0, state.score - 1) if idx > 0 else state.score
    return replace(state, revealed=state.revealed + 1, score=score), hints[idx]


def apply_guess(state, players, guess) -> Tuple[QuizState, GuessResult]:
    player = current_player(state, players)
    guess = (guess or "").strip()
    if not guess:
        return state, GuessResult(correct=False, player=player, ignored=True)

    targets = targets_for(player)
    if fuzzy_match(guess, targets):
        bonus = max(1, MAX_BONUS - state.revealed)
        logger.debug("Guess %r accepted (+%d)", guess, bonus)
        new_state = _advance(state, score=state.score + bonus, streak=state.streak + 1)
        return new_state, GuessResult(correct=True, player=player, bonus=bonus)

    logger.debug("Guess %r rejected", guess)
    result = GuessResult(correct=False, player=player, near_miss=near_miss(guess, targets))
    return replace(state, streak=0), result


def skip(state, players):
    player = current_player(state, players)
    return _advance(state, streak=0), player


def max_score(state):
    return MAX_BONUS * len(state.order)


def summary(state):
    return Summary(
        score=state.score,
        max_score=max_score(state),
        streak=state.streak,
        answered=min(state.index, len(state.order)),
    )


def get_feedback(result: GuessResult):
    """
    One line of colour-coded feedback for the terminal.
    """
    if result.correct:
        return f"{Fore.GREEN}✅ Correct! {result.player['name']} (+{result.bonus}){Style.RESET_ALL}"
    if result.near_miss:
        return f"{Fore.YELLOW}🔥 Close! Check the spelling or take a hint.{Style.RESET_ALL}"
    return f"{Fore.RED}❌ Not quite. Try a hint!{Style.RESET_ALL}"
