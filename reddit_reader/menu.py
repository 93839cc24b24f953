from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from .models import MenuOption, View


logger = logging.getLogger(__name__)

QUIT_LABEL = "Quit"
SELECT_COMMUNITY_LABEL = "Select a different community"


class Console:
    """Line-oriented terminal I/O. Tests swap in scripted functions."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def write(self, text: str = "") -> None:
        self._output(text)

    def read_line(self, prompt: str = "") -> str:
        """Raises EOFError when input is closed."""
        return self._input(prompt)


def build_options(options: Sequence[MenuOption]) -> List[MenuOption]:
    """Quit first, the caller's options, then the way back to community selection."""
    return (
        [MenuOption(QUIT_LABEL, View.QUIT)]
        + list(options)
        + [MenuOption(SELECT_COMMUNITY_LABEL, View.SELECTING_COMMUNITY)]
    )


def offer_options(options: Sequence[MenuOption], console: Console) -> MenuOption:
    """
    Show the numbered menu and return the option the user picks.

    Bad input (not a number, or outside the listed range) is reported and the
    menu is shown again. Closed input counts as choosing Quit.
    """
    all_options = build_options(options)
    last = len(all_options) - 1

    while True:
        console.write("Select an option: ")
        for i, option in enumerate(all_options):
            console.write(f"\t{i}. {option.label}")

        try:
            line = console.read_line()
        except EOFError:
            logger.info("Input closed; quitting")
            return all_options[0]

        try:
            choice = int(line.strip())
        except ValueError:
            console.write("Please use and type only numbers")
            continue

        if not 0 <= choice <= last:
            console.write(f"Please type in the range of 0 to {last}")
            continue

        selected = all_options[choice]
        logger.debug("Selected %d: %s", choice, selected.label)
        return selected
