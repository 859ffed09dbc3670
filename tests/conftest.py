"""Automatically run by pytest to set up test infrastructure."""

import pytest
import requests_mock

import slash_command_webhooks
import slash_command_webhooks.utils

from . import settings as test_settings
from .fake_github import FakeGitHub


@pytest.fixture
def requests_mocker():
    """Make requests_mock available as a fixture."""
    mocker = requests_mock.Mocker(real_http=False, case_sensitive=True)
    mocker.start()
    try:
        yield mocker
    finally:
        mocker.stop()


@pytest.fixture(autouse=True)
def settings_for_tests(mocker):
    for name, value in vars(test_settings).items():
        if name.isupper() and name != "GITHUB_WEBHOOKS_SECRET":
            mocker.patch(f"slash_command_webhooks.settings.{name}", value)


@pytest.fixture
def fake_github(requests_mocker):
    the_fake_github = FakeGitHub(login="webhook-bot")
    the_fake_github.install_mocks(requests_mocker)
    return the_fake_github


@pytest.fixture
def app():
    the_app = slash_command_webhooks.create_app(config="testing")
    the_app.config["GITHUB_WEBHOOKS_SECRET"] = test_settings.GITHUB_WEBHOOKS_SECRET
    return the_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def configure_flask_app(app):
    """
    Needed to make the app understand it's running under HTTPS, and have Flask
    initialized properly, so that templates can be rendered.
    """
    with app.test_request_context('/', base_url="https://slash-command-webhooks.herokuapp.com"):
        yield


@pytest.fixture(autouse=True)
def reset_all_memoized_functions():
    """Clears the values cached by @memoize_timed before each test. Applied automatically."""
    slash_command_webhooks.utils.clear_memoized_values()
