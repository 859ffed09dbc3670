"""Helpers for debugging."""

import base64
import gzip
import json
import logging


def is_debug(module_name):
    """Is this module configured for debug-level information?"""
    return logging.getLogger(module_name).isEnabledFor(logging.DEBUG)


def log_long(module_name, label, long_text):
    """
    Log a long data dump in a logging-safe way.

    The text is compressed onto one line, with the Python needed to read it.
    """
    data = base64.b85encode(gzip.compress(long_text.encode())).decode()
    logging.getLogger(module_name).debug(
        f"{label}: " +
        f"import base64,gzip;print(gzip.decompress(base64.b85decode({data!r})).decode())"
    )

def log_long_json(module_name, label, jdata):
    """Like log_long, but for JSON data."""
    log_long(module_name, label, json.dumps(jdata, sort_keys=True, indent=4))
