"""
Base implementation of the greeting capability.

Pure computation: no IO, no logging, no state.
"""

from greeter.domain.greeting.errors import InvalidArgumentError
from greeter.domain.greeting.ports import GreetService

GREETING_PREFIX = "Hello there, "


def _is_separator(char: str) -> bool:
    """Return True if ``char`` ends a word for title-casing purposes."""
    if char.isascii():
        return not (char.isalnum() or char == "_")
    if char.isalpha() or char.isdigit():
        return False
    return char.isspace()


def title_case(text: str) -> str:
    """Title-case the first letter of every word in ``text``.

    Characters that do not start a word are left untouched, so
    ``"mcDonald"`` becomes ``"McDonald"`` rather than ``"Mcdonald"``.
    """
    previous = " "
    chars = []
    for char in text:
        if _is_separator(previous):
            titled = char.title()
            # Some characters expand when title-cased (e.g. "ß").
            chars.append(titled if len(titled) == 1 else char)
        else:
            chars.append(char)
        previous = char
    return "".join(chars)


class BasicGreetService(GreetService):
    """Greets a caller by their title-cased name."""

    def hello(self, name: str) -> str:
        if not name:
            raise InvalidArgumentError("no name provided")
        return GREETING_PREFIX + title_case(name)
