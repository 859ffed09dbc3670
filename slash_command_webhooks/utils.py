"""
Generic utilities.
"""

import hmac
import time
from hashlib import sha256

import cachetools.func

from slash_command_webhooks import logger


class RequestFailed(Exception):
    """
    A GitHub API call failed.

    `status_code` is the HTTP status of the response, if there was one.
    """
    kind = "PLATFORM_API_FAILURE"

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class PermissionDenied(RequestFailed):
    """The token isn't allowed to do what we asked."""
    kind = "PERMISSION_DENIED"


class NotFound(RequestFailed):
    """The repo, issue, comment or user doesn't exist."""
    kind = "NOT_FOUND"


class RateLimited(RequestFailed):
    """GitHub has throttled us."""
    kind = "RATE_LIMITED"


def _failure_class(response):
    """Choose the RequestFailed subclass for a failed response."""
    status = response.status_code
    if status == 429:
        return RateLimited
    if status == 403 and (
        response.headers.get("X-RateLimit-Remaining") == "0" or
        "Retry-After" in response.headers
    ):
        return RateLimited
    if status in (401, 403):
        return PermissionDenied
    if status == 404:
        return NotFound
    return RequestFailed


def log_check_response(response, raise_for_status=True):
    """
    Logs HTTP request and response at debug level and checks if it succeeded.

    Arguments:
        response (requests.Response)
        raise_for_status (bool): if True, raise a RequestFailed (or one of
            its subclasses) if the response is an error.
    """
    msg = "Request: {0.method} {0.url}: {0.body!r}".format(response.request)
    logger.debug(msg)
    msg = "Response: {0.status_code} {0.reason!r} for {0.url}: {0.content!r}".format(response)
    logger.debug(msg)
    if raise_for_status:
        try:
            response.raise_for_status()
        except Exception as exc:
            req = response.request
            exc_class = _failure_class(response)
            raise exc_class(
                f"HTTP request failed: {req.method} {req.url}. Response body: {response.content}",
                status_code=response.status_code,
            ) from exc


def is_valid_payload(secret: str, signature: str, payload: bytes, digestmod=sha256) -> bool:
    """
    Ensure payload is valid according to signature.

    Make sure the payload hashes to the signature as calculated using
    the shared secret.

    Arguments:
        secret (str): The shared secret
        signature (str): Signature as calculated by the server, sent in
            the request, like "sha256=1a2b3c..."
        payload (bytes): The request payload
        digestmod: the hashlib constructor GitHub used for `signature`.

    Returns:
        bool: Is the payload legit?
    """
    if not secret or not signature:
        return False
    mac = hmac.new(secret.encode(), msg=payload, digestmod=digestmod)
    digest = digestmod().name + '=' + mac.hexdigest()
    return hmac.compare_digest(digest.encode(), signature.encode())


def text_summary(text, length=40):
    """
    Make a summary of `text`, at most `length` chars long.

    The middle will be elided if needed.
    """
    if len(text) <= length:
        return text
    else:
        start = (length - 3) // 2
        end = length - 3 - start
        return text[:start] + "..." + text[-end:]


# A list of all the memoized functions, so that `clear_memoized_values` can
# clear them all.
_memoized_functions = []

def memoize_timed(minutes):
    """Cache the value of a function for `minutes` minutes."""
    def _timed(func):
        # We use time.time as the timer so that freezegun can test it, and in a
        # new function so that freezegun's patching will work.  Freezegun doesn't
        # patch time.monotonic, and we aren't that picky about the time anyway.
        def patchable_timer():
            return time.time()
        func = cachetools.func.ttl_cache(ttl=60 * minutes, timer=patchable_timer)(func)
        _memoized_functions.append(func)
        return func
    return _timed

def clear_memoized_values():
    """Clear all the values saved by @memoize_timed, to ensure isolated tests."""
    for func in _memoized_functions:
        func.cache_clear()


def sentry_extra_context(data_dict):
    """Apply the keys and values from data_dict to the Sentry extra context."""
    import sentry_sdk
    for key, value in data_dict.items():
        sentry_sdk.set_extra(key, value)
