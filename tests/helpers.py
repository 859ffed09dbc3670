"""Helpers for tests."""

import hmac
import json
import re
from hashlib import sha1, sha256

from . import settings as test_settings


def check_good_markdown(text: str) -> None:
    """
    Make some checks of Markdown text.

    These are meant to catch mistakes in templates or code producing Markdown.

    Returns:
        Nothing.  Will raise an exception with a failure message if something
        is wrong.
    """
    if text.startswith((" ", "\n", "\t")):
        raise ValueError(f"Markdown shouldn't start with whitespace: {text!r}")

    # HTML comments must be on a line by themselves or the Markdown won't
    # render properly.
    if re.search(".<!--", text):
        raise ValueError(f"Markdown shouldn't have an HTML comment in the middle of a line: {text!r}")
    if re.search("-->.", text):
        raise ValueError(f"Markdown shouldn't have an HTML comment with following text: {text!r}")

    # Unrendered template syntax.
    if re.search(r"\{\{|\{%", text):
        raise ValueError(f"Markdown has template syntax in it: {text!r}")


def sign_payload(payload: bytes, secret: str = test_settings.GITHUB_WEBHOOKS_SECRET, digestmod=sha256) -> str:
    """Make the signature GitHub would send for `payload`."""
    mac = hmac.new(secret.encode(), msg=payload, digestmod=digestmod)
    return digestmod().name + "=" + mac.hexdigest()


def signed_headers(payload: bytes, event_type: str = "issue_comment", legacy: bool = False) -> dict:
    """The headers GitHub sends with a webhook delivery of `payload`."""
    headers = {
        "Content-Type": "application/json",
        "X-GitHub-Event": event_type,
    }
    if legacy:
        headers["X-Hub-Signature"] = sign_payload(payload, digestmod=sha1)
    else:
        headers["X-Hub-Signature-256"] = sign_payload(payload)
    return headers


def comment_event(issue, body, user="alice", action="created", comment=None):
    """
    Make the payload of an issue_comment webhook event.

    If `comment` isn't provided, the comment is made on `issue` first, as
    GitHub would have done before sending the event.
    """
    if comment is None:
        comment = issue.add_comment(user=user, body=body)
    return {
        "action": action,
        "issue": issue.as_json(),
        "comment": comment.as_json(),
        "repository": issue.repo.as_json(),
        "sender": {"login": user},
    }


BASE_URL = "https://slash-command-webhooks.herokuapp.com"


def post_raw(client, payload, headers):
    """
    POST bytes to the receiver over https, return the response.

    Over plain http, SSLify would answer with a redirect instead.
    """
    return client.post("/github/hook-receiver", data=payload, headers=headers, base_url=BASE_URL)


def post_event(client, event, **kwargs):
    """POST a signed webhook delivery to the receiver, return the response."""
    payload = json.dumps(event).encode()
    return post_raw(client, payload, signed_headers(payload, **kwargs))
