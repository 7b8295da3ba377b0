"""Interactive prompts used by switch, reset and setup."""

from __future__ import annotations

import sys


def prompt_for_selection(options: list[str], prompt_text: str) -> str | None:
    """
    Prompt user to select one entry from a list interactively.

    Args:
        options: Entries to choose from, displayed in the given order
        prompt_text: Text to display before options

    Returns:
        Selected entry or None if user cancels or stdin is not a terminal
    """
    if not sys.stdin.isatty():
        return None

    print(f"\n{prompt_text}")
    print("-" * 40)

    for i, option in enumerate(options, 1):
        print(f"  [{i}] {option}")

    print("  [0] Cancel")
    print()

    while True:
        try:
            choice = input("Enter selection (number): ").strip()
            if choice == "0" or choice.lower() in ("q", "quit", "cancel"):
                return None

            idx = int(choice)
            if 1 <= idx <= len(options):
                return options[idx - 1]

            print(f"Invalid selection. Enter 1-{len(options)} or 0 to cancel.")
        except ValueError:
            print("Please enter a number.")
        except (EOFError, KeyboardInterrupt):
            print("\nCancelled.")
            return None


def prompt_with_default(label: str, current: str) -> str:
    """Ask for a value, keeping ``current`` on blank input or end of input."""
    try:
        answer = input(f"{label} [{current}]: ").strip()
    except EOFError:
        return current
    return answer or current


def confirm(question: str) -> bool:
    """Ask a yes/no question; anything but y/yes (including EOF) means no."""
    try:
        response = input(f"{question} [y/N]: ").strip().lower()
    except EOFError:
        return False
    return response in ("y", "yes")
