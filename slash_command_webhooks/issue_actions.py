"""
Changes the bot makes on GitHub issues.
"""

import logging

from slash_command_webhooks.auth import get_github_session
from slash_command_webhooks.settings import REACTION_TYPES
from slash_command_webhooks.utils import log_check_response, text_summary

logger = logging.getLogger(__name__)


class IssueActions:
    """
    Implementation of the actions commands take on an issue.

    Each method is one GitHub API call, made with a bounded timeout and never
    retried. Failures are raised as RequestFailed or one of its subclasses.

    """

    def __init__(self, repo: str, issue_number: int):
        self.repo = repo
        self.issue_number = issue_number

    def __str__(self):
        return f"{self.repo}#{self.issue_number}"

    def add_reaction_to_comment(self, *, comment_id: int, content: str) -> None:
        """
        Put a reaction (like "rocket") on a comment.
        """
        if content not in REACTION_TYPES:
            raise ValueError(f"Not a GitHub reaction: {content!r}")
        url = f"/repos/{self.repo}/issues/comments/{comment_id}/reactions"
        logger.info(f"Reacting {content!r} to comment {comment_id} on {self}")
        resp = get_github_session().post(url, json={"content": content})
        log_check_response(resp)

    def add_assignees_to_issue(self, *, assignees: list[str]) -> None:
        """
        Add people to the assignees of the issue.

        GitHub leaves already-assigned people alone, so this is safe to repeat.
        """
        url = f"/repos/{self.repo}/issues/{self.issue_number}/assignees"
        logger.info(f"Assigning {', '.join(assignees)} to {self}")
        resp = get_github_session().post(url, json={"assignees": assignees})
        log_check_response(resp)

    def add_comment_to_issue(self, *, comment_body: str) -> None:
        """
        Add a comment to the issue.
        """
        url = f"/repos/{self.repo}/issues/{self.issue_number}/comments"
        logger.info(f"Commenting on {self}: {text_summary(comment_body, 90)!r}")
        resp = get_github_session().post(url, json={"body": comment_body})
        log_check_response(resp)
