"""Tests of recognizing slash-commands."""

import pytest

from slash_command_webhooks.commands import Command, match_command


@pytest.mark.parametrize("body, command", [
    ("/assignme", Command.ASSIGNME),
    ("/assignme please", Command.ASSIGNME),
    ("/assignme\nI'd like to work on this.", Command.ASSIGNME),
    ("/help", Command.HELP),
    ("  /help  ", Command.HELP),
    ("\n\t/help\n", Command.HELP),
    ("/help me out", Command.HELP),
])
def test_commands(body, command):
    assert match_command(body) is command


@pytest.mark.parametrize("body", [
    None,
    "",
    "   ",
    "/",
    "/helpme now",
    "/helpme",
    "/assignmeplease",
    "/Help",
    "/ASSIGNME",
    "/help/assignme",
    "help",
    "assignme",
    "Please /assignme",
    "I think /help would help.",
    "//help",
    "/unknown",
])
def test_not_commands(body):
    assert match_command(body) is Command.NONE
