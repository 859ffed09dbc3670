from flask import Blueprint, jsonify

from slash_command_webhooks import __version__

ui = Blueprint('ui', __name__)


@ui.route("/")
def index():
    """
    A quick check that the service is up.
    """
    return jsonify({"status": "ok", "version": __version__})
