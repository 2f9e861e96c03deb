"""Room services: codes, the room state machine, the registry and relaying.

Nothing in here touches the transport. Socket handlers translate client
events into registry calls and hand the resulting relay instructions to an
EventRelay.
"""

from .categories import CATEGORIES
from .codes import CodeGenerator
from .errors import RoomError, RoomFullError, RoomNotFoundError, TurnViolationError, ValidationError
from .registry import JoinResult, RoomRegistry
from .relay import EventRelay, RelayInstruction, SocketIORelay
from .room import Player, Room, RoomState

__all__ = [
    'CATEGORIES',
    'CodeGenerator',
    'EventRelay',
    'JoinResult',
    'Player',
    'RelayInstruction',
    'Room',
    'RoomError',
    'RoomFullError',
    'RoomNotFoundError',
    'RoomRegistry',
    'RoomState',
    'SocketIORelay',
    'TurnViolationError',
    'ValidationError',
]
