"""
These are the views that process webhook events coming from Github.
"""

import logging
from hashlib import sha1, sha256

import requests
from flask import current_app as app
from flask import Blueprint, jsonify, request

from slash_command_webhooks.debug import is_debug, log_long_json
from slash_command_webhooks.handlers import process_comment
from slash_command_webhooks.types import CommentEvent, MalformedPayload
from slash_command_webhooks.utils import (
    RequestFailed, is_valid_payload, sentry_extra_context,
)

github_bp = Blueprint('github_views', __name__)
logger = logging.getLogger(__name__)


def signature_is_valid() -> bool:
    """
    Check the request's signature header against our shared secret.

    GitHub sends X-Hub-Signature-256, and the older X-Hub-Signature too.
    We prefer the sha256 one.
    """
    secret = app.config.get('GITHUB_WEBHOOKS_SECRET')
    signature = request.headers.get("X-Hub-Signature-256")
    if signature is not None:
        return is_valid_payload(secret, signature, request.data, digestmod=sha256)
    signature = request.headers.get("X-Hub-Signature")
    if signature is not None:
        return is_valid_payload(secret, signature, request.data, digestmod=sha1)
    return False


@github_bp.route('/hook-receiver', methods=('POST',))
def hook_receiver():
    """
    Process incoming GitHub webhook events.

    1.  Make sure the payload hashes to the proper signature. If not,
        reject the request with http status of 401.
    2.  If it's a comment with a slash-command, carry out the command.
    3.  Respond with http status 200, even if GitHub calls failed: GitHub
        would only redeliver the event, and we'd fail the same way.

    Returns:
        A response, or Tuple[str, int]: Message payload and HTTP status code
    """
    if not signature_is_valid():
        msg = "Rejecting because signature doesn't match!"
        logger.info(msg)
        return msg, 401

    event = request.get_json(silent=True)
    if not isinstance(event, dict):
        msg = "Rejecting because payload isn't a JSON object"
        logger.info(msg)
        return msg, 400

    action = event.get("action")
    repo = who = None
    if isinstance(event.get("repository"), dict):
        repo = event["repository"].get("full_name")
    if isinstance(event.get("sender"), dict):
        who = event["sender"].get("login")
    who = who or "someone"
    keys = set(event.keys()) - {"action", "sender", "repository", "organization", "installation"}
    logger.info(f"Incoming GitHub event: {repo=!r}, {action=!r}, {who=!r}, keys: {' '.join(sorted(keys))}")
    if is_debug(__name__):
        log_long_json(__name__, "Incoming GitHub event", event)

    sentry_extra_context({"event": event})

    # Actions and keys we get:
    #   Commenting on an issue: action=created, comment, issue, repository, sender
    #   Editing a comment: action=edited, changes, comment, issue
    #   Commenting on a PR: the same as an issue, with issue.pull_request

    match event:
        case {"comment": _, "issue": _}:
            return handle_comment_event(event)

        case {"zen": _, "hook": _}:
            # this is a ping
            logger.info(f"ping from {repo}")
            return "PONG"

        case _:
            # Ignore all other events.
            return "Thank you", 200


def handle_comment_event(event):
    """Handle a webhook event about a comment."""
    try:
        comment_event = CommentEvent.from_payload(event)
    except MalformedPayload as exc:
        logger.info(f"Rejecting malformed comment event: {exc}")
        return str(exc), 400

    try:
        command = process_comment(comment_event)
    except (RequestFailed, requests.RequestException) as exc:
        kind = getattr(exc, "kind", "PLATFORM_API_FAILURE")
        logger.exception(f"{comment_event}: GitHub call failed ({kind})")
        return jsonify({"error": kind}), 200

    return jsonify({"command": command.name}), 200
