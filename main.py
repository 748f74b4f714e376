import sys

from colorama import Fore, Style

from src.config import configure_logging
from src.utils import load_players, DatasetError
from src.logics import (
    new_game, is_finished, current_player, facts_for,
    apply_guess, apply_hint, skip, summary, get_feedback,
)


def print_facts(player, number, total):
    print(f"\n--- Player {number}/{total} ---")
    for icon, label, value in facts_for(player):
        print(f"{icon}  {label}: {value}")


def play_game():
    try:
        all_players = load_players()
    except DatasetError as e:
        print(f"{Fore.RED}{e}{Style.RESET_ALL}")
        return 1

    state = new_game(all_players)

    print("\n" + "="*40)
    print("      FOOTY QUIZ: GUESS THE PLAYER")
    print("="*40)
    print("Type a name to guess, '?' for a hint, 'skip' to pass, 'quit' to stop.")

    shown = None
    while not is_finished(state):
        if shown != state.index:
            print_facts(current_player(state, all_players), state.index + 1, len(state.order))
            shown = state.index

        try:
            user_input = input(f"\n(score {state.score}, streak {state.streak}) Your guess: ").strip()
        except EOFError:
            print()
            break
        command = user_input.lower()

        if command == "quit":
            break
        if command in ("?", "hint"):
            state, hint = apply_hint(state, all_players)
            print(f"💡 {hint}")
            continue
        if command == "skip":
            state, skipped = skip(state, all_players)
            print(f"ℹ️  It was: {skipped['name']}")
            continue

        state, result = apply_guess(state, all_players, user_input)
        if not result.ignored:
            print(get_feedback(result))

    final = summary(state)
    print("\n" + "="*40)
    print(f"🏁 Done! Score: {final.score} / Max {final.max_score}")
    print(f"Players: {final.answered}/{len(state.order)} | Final streak: {final.streak}")
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(play_game())
