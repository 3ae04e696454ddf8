import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import TestingConfig
from medinotes import create_app


@pytest.fixture()
def app_factory():
    """Build an app from TestingConfig with selected settings overridden."""

    def _make(auth_provider=None, **overrides):
        config_class = type("OverriddenConfig", (TestingConfig,), overrides)
        return create_app(config_class, auth_provider=auth_provider)

    return _make


@pytest.fixture()
def app():
    """Create a Flask app instance configured for tests."""
    app = create_app("config.TestingConfig")

    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()


@pytest.fixture()
def signed_in(client):
    """Place a user from the identity provider in the test client's session."""
    with client.session_transaction() as session:
        session["user"] = {"id": "user_123", "name": "Dr. Ada Lovelace"}
    return client
