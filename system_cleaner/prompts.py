"""
Interactive prompts for system_cleaner.

Both prompts treat end of input as the cautious answer so that piping the
tool from a non-interactive shell never starts a cleanup by accident.
"""

from __future__ import annotations

CONFIRM_PROMPT = "Continue? (y/n): "
EXIT_PROMPT = "\nPress Enter to exit..."


def confirm_continue(message: str = CONFIRM_PROMPT, skip_prompt: bool = False) -> bool:
    """
    Ask the user to confirm the cleanup.

    Only 'y' or 'n' (case-insensitive) are accepted; any other answer repeats
    the question.

    Args:
        message: Prompt message to display to the user
        skip_prompt: If True, skip confirmation and return True

    Returns:
        bool: True if the user answered 'y' or the prompt was skipped
    """
    if skip_prompt:
        return True

    while True:
        try:
            response = input(message).strip().lower()
        except EOFError:
            print("\nConfirmation not received.")
            return False
        if response == "y":
            return True
        if response == "n":
            return False
        print("Please answer 'y' or 'n'.")


def wait_for_exit(message: str = EXIT_PROMPT) -> None:
    """Block until the user presses Enter."""
    try:
        input(message)
    except EOFError:
        return
