import logging
import os
import sys

from flask import Flask
from flask_sslify import SSLify
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
from werkzeug.middleware.proxy_fix import ProxyFix
from werkzeug.utils import import_string

__version__ = "0.1.0"

log_level = os.environ.get('LOGLEVEL', 'INFO').upper()
logger = logging.getLogger(__name__)
handler = logging.StreamHandler(sys.stderr)
handler.setLevel(log_level)
logger.addHandler(handler)
logger.setLevel(log_level)

# urllib3 logs every connection at debug level, quiet it.
logging.getLogger("urllib3").setLevel("WARN")


def expand_config(name=None):
    if not name:
        name = "default"
    return "slash_command_webhooks.config.{classname}Config".format(
        classname=name.capitalize(),
    )


def create_app(config=None):
    if os.environ.get("SENTRY_DSN", ""):
        sentry_sdk.init(integrations=[FlaskIntegration()])

    app = Flask(__name__)
    app.wsgi_app = ProxyFix(app.wsgi_app)   # type: ignore[method-assign]
    config = config or os.environ.get("SLASH_COMMAND_WEBHOOKS_CONFIG") or "default"
    config_obj = import_string(expand_config(config))()
    app.config.from_object(config_obj)

    if not app.debug:
        SSLify(app)

    # attach our blueprints
    from .github_views import github_bp
    app.register_blueprint(github_bp, url_prefix="/github")
    from .ui import ui as ui_blueprint
    app.register_blueprint(ui_blueprint)

    return app
