"""
Get information about the bot and the people using it.
"""

import logging

from slash_command_webhooks.auth import get_github_session
from slash_command_webhooks.settings import PERMISSION_LEVELS
from slash_command_webhooks.utils import log_check_response, memoize_timed

logger = logging.getLogger(__name__)


@memoize_timed(minutes=60)
def github_whoami():
    self_resp = get_github_session().get("/user")
    log_check_response(self_resp)
    return self_resp.json()


def get_bot_username() -> str:
    """What is the username of the bot?"""
    me = github_whoami()
    return me["login"]


def get_user_permission(repo_fullname: str, login: str) -> str:
    """
    Get the permission `login` has on a repo.

    Returns one of PERMISSION_LEVELS.  People who aren't collaborators have
    "read" on public repos, and "none" on private ones.
    """
    url = f"/repos/{repo_fullname}/collaborators/{login}/permission"
    resp = get_github_session().get(url)
    log_check_response(resp)
    data = resp.json()
    # role_name is finer-grained ("triage", "maintain"), permission is the
    # legacy coarse value ("read", "write", "admin").
    perm = data.get("role_name") or data.get("permission") or "none"
    if perm == "pull":
        perm = "read"
    elif perm == "push":
        perm = "write"
    if perm not in PERMISSION_LEVELS:
        logger.warning(f"Unknown permission {perm!r} for {login} on {repo_fullname}")
        perm = data.get("permission") or "none"
    return perm


def has_permission(perm: str, required: str) -> bool:
    """Is `perm` at least as powerful as `required`?"""
    if required not in PERMISSION_LEVELS:
        raise ValueError(f"Unknown permission level: {required!r}")
    if perm not in PERMISSION_LEVELS:
        return False
    return PERMISSION_LEVELS.index(perm) >= PERMISSION_LEVELS.index(required)
