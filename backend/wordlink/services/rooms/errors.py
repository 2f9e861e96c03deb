class RoomError(Exception):
    """Base class for request-level failures reported back to one connection."""

    reason = 'request failed'

    def __init__(self, reason=None):
        if reason:
            self.reason = reason
        super().__init__(self.reason)


class ValidationError(RoomError):
    reason = 'invalid or missing fields'


class RoomNotFoundError(RoomError):
    reason = 'room not found'


class RoomFullError(RoomError):
    reason = 'room full'


class TurnViolationError(RoomError):
    reason = 'not your turn'
