"""
Carry out the slash-commands found in issue comments.
"""

import logging
from typing import Optional

import requests
from flask import render_template

from slash_command_webhooks import settings
from slash_command_webhooks.commands import Command, Registration, match_command
from slash_command_webhooks.info import get_bot_username, get_user_permission, has_permission
from slash_command_webhooks.issue_actions import IssueActions
from slash_command_webhooks.types import CommentEvent
from slash_command_webhooks.utils import RequestFailed

logger = logging.getLogger(__name__)


def assignme(event: CommentEvent, actions, reply: Optional[str] = None) -> None:
    """Assign the commenter to the issue."""
    actions.add_assignees_to_issue(assignees=[event.actor])


def help_(event: CommentEvent, actions, reply: Optional[str] = None) -> None:
    """Comment on the issue with the list of commands."""
    assert reply, "The help command needs a reply to post"
    actions.add_comment_to_issue(comment_body=reply)


REGISTRATIONS = {
    Command.ASSIGNME: Registration(handler=assignme),
    Command.HELP: Registration(handler=help_, reply_template="help_comment.md.j2"),
}


def is_bot_comment(event: CommentEvent) -> bool:
    """
    Did the bot write this comment?

    If GitHub won't tell us who the bot is, assume it didn't, rather than
    refuse every command.
    """
    try:
        return event.actor == get_bot_username()
    except (RequestFailed, requests.RequestException):
        logger.warning(f"{event}: couldn't get the bot's username", exc_info=True)
        return False


def wanted_actions():
    """The comment actions we respond to."""
    if settings.ALLOW_EDITS:
        return {"created", "edited"}
    return {"created"}


def process_comment(event: CommentEvent, actions=None) -> Command:
    """
    Do whatever a comment asks for.

    Each event is handled once, start to finish. Nothing is retried: if a
    GitHub call fails, the exception propagates, and steps already taken
    (like the reaction) stay done.

    Arguments:
        event: the comment that was made.
        actions: the object that changes things on GitHub. Defaults to an
            IssueActions for the event's issue.

    Returns:
        The Command that was carried out, or Command.NONE if nothing was done.
    """
    if event.action not in wanted_actions():
        logger.debug(f"{event}: ignoring comment action {event.action!r}")
        return Command.NONE

    command = match_command(event.body)
    if command is Command.NONE:
        return Command.NONE

    if is_bot_comment(event):
        # Our own comments come back to us as events.
        logger.debug(f"{event}: ignoring my own comment")
        return Command.NONE

    required = settings.COMMAND_PERMISSION_LEVEL
    if required != "none":
        perm = get_user_permission(event.repo, event.actor)
        if not has_permission(perm, required):
            logger.info(
                f"{event}: {event.actor} has {perm!r} permission, " +
                f"{required!r} needed for /{command.value}"
            )
            return Command.NONE

    registration = REGISTRATIONS[command]
    if actions is None:
        actions = IssueActions(event.repo, event.issue_number)

    logger.info(f"{event}: /{command.value} from {event.actor}")
    if registration.reaction:
        try:
            actions.add_reaction_to_comment(
                comment_id=event.comment_id,
                content=settings.REACTION_TYPE,
            )
        except (RequestFailed, requests.RequestException, ValueError):
            logger.exception(f"{event}: couldn't react to comment {event.comment_id}")

    reply = None
    if registration.reply_template:
        reply = render_template(registration.reply_template, event=event, command=command)
    registration.handler(event, actions, reply=reply)
    return command
