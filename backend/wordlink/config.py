import os


def _csv(value):
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # "*" allows any origin (static frontends hosted elsewhere)
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Room codes: length widens by one after this many collisions in a row
    ROOM_CODE_LENGTH = int(os.environ.get('ROOM_CODE_LENGTH', '4'))
    ROOM_CODE_MAX_ATTEMPTS = int(os.environ.get('ROOM_CODE_MAX_ATTEMPTS', '100'))
    # Optional: seed code/category randomness (demos, tests). Empty disables.
    ROOM_CODE_SEED = os.environ.get('ROOM_CODE_SEED') or None
    # Optional: override the category catalogue with a comma separated list
    ROOM_CATEGORIES = _csv(os.environ.get('ROOM_CATEGORIES', '')) or None

    @staticmethod
    def cors_origins(value):
        if not value or value == '*':
            return '*'
        return _csv(value) if isinstance(value, str) else list(value)
