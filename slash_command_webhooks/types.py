"""Types specific to slash_command_webhooks."""

from __future__ import annotations

import dataclasses
from typing import Dict

# A webhook payload as described by a JSON object.
EventDict = Dict


class MalformedPayload(Exception):
    """A webhook payload is missing data we need, or has the wrong shape."""


@dataclasses.dataclass(frozen=True)
class CommentEvent:
    """One "issue comment" webhook delivery, with just the parts we use."""
    action: str
    # The repo full_name, like "an-org/a-repo".
    repo: str
    issue_number: int
    comment_id: int
    body: str
    # The login of the user who wrote the comment.
    actor: str

    @classmethod
    def from_payload(cls, event: EventDict) -> CommentEvent:
        try:
            comment = event["comment"]
            actor = (event.get("sender") or {}).get("login") or comment["user"]["login"]
            made = cls(
                action=event["action"],
                repo=event["repository"]["full_name"],
                issue_number=event["issue"]["number"],
                comment_id=comment["id"],
                body=comment.get("body") or "",
                actor=actor,
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise MalformedPayload(f"Comment event is missing {exc}") from exc

        for name, typ in [
            ("action", str), ("repo", str), ("issue_number", int),
            ("comment_id", int), ("body", str), ("actor", str),
        ]:
            value = getattr(made, name)
            if not isinstance(value, typ) or isinstance(value, bool):
                raise MalformedPayload(f"Comment event has a bad {name}: {value!r}")
        return made

    def __str__(self):
        return f"{self.repo}#{self.issue_number}"
