"""Settings for how the webhook should behave."""

import os
from typing import Sequence


# Repository permissions, from least to most powerful.
PERMISSION_LEVELS = ["none", "read", "triage", "write", "maintain", "admin"]

# The reactions GitHub allows on comments.
REACTION_TYPES = ["+1", "-1", "laugh", "confused", "heart", "hooray", "rocket", "eyes"]


def read_bool_setting(setting_name: str, default: bool = False) -> bool:
    """Read a yes/no setting: "1", "true", "yes" and "on" are true."""
    value = os.environ.get(setting_name, None)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def read_choice_setting(setting_name: str, choices: Sequence[str], default: str) -> str:
    """
    Read a setting that must be one of `choices`.

    A value that isn't one of the choices is an error when the service
    starts, rather than on every webhook delivery.
    """
    value = os.environ.get(setting_name, default).strip()
    if value not in choices:
        raise ValueError(
            f"Setting {setting_name}={value!r} should be one of: {', '.join(choices)}"
        )
    return value


# The bearer token used for every GitHub API call.
GITHUB_PERSONAL_TOKEN = os.environ.get("GITHUB_PERSONAL_TOKEN", None)

# Seconds to wait on any single GitHub API call. Calls are never retried.
GITHUB_API_TIMEOUT = float(os.environ.get("GITHUB_API_TIMEOUT", "5"))

# The reaction put on a comment to acknowledge a recognized command.
REACTION_TYPE = read_choice_setting("REACTION_TYPE", REACTION_TYPES, "rocket")

# Also act on comments that were edited to contain a command.
ALLOW_EDITS = read_bool_setting("ALLOW_EDITS")

# The repository permission a commenter needs for commands to run.
# "none" lets anyone use them.
COMMAND_PERMISSION_LEVEL = read_choice_setting("COMMAND_PERMISSION_LEVEL", PERMISSION_LEVELS, "none")
