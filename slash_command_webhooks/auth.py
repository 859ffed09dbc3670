"""
Create authenticated sessions for access to GitHub.
"""

import requests
from urlobject import URLObject

from slash_command_webhooks import settings


class BaseUrlSession(requests.Session):
    """
    A requests Session class that applies a base URL to the requested URL,
    and a default timeout to every request.
    """
    def __init__(self, base_url, timeout=None):
        super().__init__()
        self.base_url = URLObject(base_url)
        self.timeout = timeout

    def request(self, method, url, data=None, headers=None, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(
            method=method,
            url=self.base_url.relative(url),
            data=data,
            headers=headers,
            **kwargs
        )


def get_github_session():
    """
    Get the GitHub session to use.
    """
    session = BaseUrlSession(
        base_url="https://api.github.com",
        timeout=settings.GITHUB_API_TIMEOUT,
    )
    session.headers["Authorization"] = f"Bearer {settings.GITHUB_PERSONAL_TOKEN}"
    session.headers["Accept"] = "application/vnd.github+json"
    session.trust_env = False   # prevent reading the local .netrc
    return session
