import os
import random
import sys
import pytest

# Ensure the backend root (containing the `wordlink` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wordlink import create_app, get_registry, socketio
from wordlink.services.rooms import CodeGenerator, RoomRegistry


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    CORS_ALLOWED_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    LOG_LEVEL = 'DEBUG'
    ROOM_CODE_LENGTH = 4
    ROOM_CODE_MAX_ATTEMPTS = 100
    ROOM_CODE_SEED = 1234
    ROOM_CATEGORIES = None


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def registry(flask_app):
    return get_registry(flask_app)


@pytest.fixture()
def sio_factory(flask_app):
    """Build connected Socket.IO test clients; all are disconnected on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def seeded_registry():
    def _make(seed=7, **kwargs):
        return RoomRegistry(CodeGenerator(rng=random.Random(seed)), rng=random.Random(seed), **kwargs)
    return _make
