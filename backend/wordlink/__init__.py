import random

import click
from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from wordlink.config import Config
from wordlink.services.rooms import CATEGORIES, CodeGenerator, RoomRegistry, SocketIORelay

socketio = SocketIO(async_mode=None)


def get_registry(flask_app) -> RoomRegistry:
    return flask_app.extensions['room_registry']


def get_relay(flask_app) -> SocketIORelay:
    return flask_app.extensions['event_relay']


def _build_registry(config) -> RoomRegistry:
    seed = config.get('ROOM_CODE_SEED')
    # Separate streams so category picks do not shift the code sequence
    code_rng = random.Random(int(seed)) if seed is not None else None
    category_rng = random.Random(int(seed) + 1) if seed is not None else None
    generator = CodeGenerator(
        length=int(config.get('ROOM_CODE_LENGTH', 4)),
        max_attempts=int(config.get('ROOM_CODE_MAX_ATTEMPTS', 100)),
        rng=code_rng,
    )
    return RoomRegistry(generator, config.get('ROOM_CATEGORIES') or CATEGORIES, rng=category_rng)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origins = Config.cors_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS'))
    CORS(flask_app, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    flask_app.extensions['room_registry'] = _build_registry(flask_app.config)
    flask_app.extensions['event_relay'] = SocketIORelay(socketio, namespace=namespace)

    from wordlink.main import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from wordlink.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    @click.command('categories')
    def categories_command():
        """Lists the category catalogue with the indices clients receive."""
        registry = get_registry(flask_app)
        for idx, name in enumerate(registry.categories):
            click.echo(f'{idx:>3}  {name}')

    flask_app.cli.add_command(categories_command)

    flask_app.logger.info(f"[startup] namespace={namespace} categories={len(get_registry(flask_app).categories)}")
    return flask_app
