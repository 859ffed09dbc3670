"""
Slash-commands: recognizing them in comment text.
"""

from __future__ import annotations

import dataclasses
import re
from enum import Enum
from typing import Callable, Optional


class Command(Enum):
    """
    The commands people can write at the start of a comment.

    The value is the keyword that follows the slash.
    """
    ASSIGNME = "assignme"
    HELP = "help"
    NONE = ""


KEYWORDS = {cmd.value: cmd for cmd in Command if cmd is not Command.NONE}

# A slash, a keyword, then whitespace or the end of the text.
COMMAND_RE = re.compile(r"/(?P<keyword>[^\s/]+)(?:\s|$)")


def match_command(body: Optional[str]) -> Command:
    """
    Find the command a comment starts with.

    Leading and trailing whitespace is ignored. Keywords are matched exactly,
    so "/Help" and "/helpme" are not commands.

    Returns:
        The Command, or Command.NONE if the comment isn't a command.
    """
    if not body:
        return Command.NONE
    m = COMMAND_RE.match(body.strip())
    if m is None:
        return Command.NONE
    return KEYWORDS.get(m["keyword"], Command.NONE)


@dataclasses.dataclass(frozen=True)
class Registration:
    """How to carry out one command."""
    # Called as handler(event, actions, reply=...).
    handler: Callable[..., None]
    # Should we put a reaction on the comment before handling it?
    reaction: bool = True
    # A template to render into the `reply` passed to the handler.
    reply_template: Optional[str] = None
