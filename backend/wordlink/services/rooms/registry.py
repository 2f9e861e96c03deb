import logging
import random
import threading
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .categories import CATEGORIES
from .codes import CodeGenerator
from .errors import RoomFullError, RoomNotFoundError, ValidationError
from .relay import RelayInstruction, to_connection, to_room
from .room import Room

logger = logging.getLogger(__name__)


class JoinResult(NamedTuple):
    code: str
    category_index: int
    category_name: str
    starter_connection_id: str
    connection_ids: List[str]


def _require(**fields) -> None:
    missing = [name for name, value in fields.items() if not isinstance(value, str) or not value.strip()]
    if missing:
        raise ValidationError(f"invalid or missing fields: {', '.join(missing)}")


class RoomRegistry:
    """Owner of every active room.

    Rooms are keyed by code, and a second index maps each seated connection to
    its room so membership never has to be discovered by scanning. Every public
    operation runs inside one critical section, which makes code reservation
    and seat assignment atomic under threaded workers.
    """

    def __init__(self, code_generator: Optional[CodeGenerator] = None,
                 categories: Sequence[str] = CATEGORIES, rng: Optional[random.Random] = None):
        if not categories:
            raise ValueError('category catalogue is empty')
        self._codes = code_generator or CodeGenerator()
        self._categories = tuple(categories)
        self._rng = rng or random.Random()
        self._rooms: Dict[str, Room] = {}
        self._by_connection: Dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._rooms)

    def __contains__(self, code):
        with self._lock:
            return code in self._rooms

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._categories

    def codes(self) -> List[str]:
        with self._lock:
            return list(self._rooms)

    def get(self, code: str) -> Optional[Room]:
        with self._lock:
            return self._rooms.get((code or '').upper())

    def room_for(self, connection_id: str) -> Optional[Room]:
        with self._lock:
            code = self._by_connection.get(connection_id)
            return self._rooms.get(code) if code else None

    def snapshot(self) -> List[dict]:
        with self._lock:
            return [room.to_dict() for room in self._rooms.values()]

    def create_room(self, connection_id: str, username: str) -> str:
        _require(username=username)
        with self._lock:
            if connection_id in self._by_connection:
                raise ValidationError('already in a room')
            code = self._codes.generate(self._rooms)
            category_index = self._rng.randrange(len(self._categories))
            self._rooms[code] = Room(code, connection_id, username.strip(), category_index)
            self._by_connection[connection_id] = code
        logger.info(f"[room-create] code={code} sid={connection_id} category={category_index}")
        return code

    def join_room(self, code: str, username: str, connection_id: str) -> JoinResult:
        _require(code=code, username=username)
        code = code.strip().upper()
        with self._lock:
            room = self._rooms.get(code)
            if room is None:
                raise RoomNotFoundError()
            if room.is_full:
                raise RoomFullError()
            if connection_id in self._by_connection:
                raise ValidationError('already in a room')
            room.seat(connection_id, username.strip())
            self._by_connection[connection_id] = code
            starter = room.current_player()
            result = JoinResult(
                code=code,
                category_index=room.category_index,
                category_name=self._categories[room.category_index],
                starter_connection_id=starter.connection_id,
                connection_ids=room.connection_ids(),
            )
        logger.info(f"[room-join] code={code} sid={connection_id} starter={result.starter_connection_id}")
        return result

    def handle_action(self, connection_id: str, term) -> RelayInstruction:
        with self._lock:
            code = self._by_connection.get(connection_id)
            room = self._rooms.get(code) if code else None
            if room is None:
                raise RoomNotFoundError()
            actor = room.take_turn(connection_id)
            next_player = room.current_player()
            instruction = to_room(room.connection_ids(), 'opponentAction', {
                'username': actor.username,
                'term': term,
                'nextPlayerConnectionId': next_player.connection_id,
            })
        logger.info(f"[turn] code={code} by={connection_id} next={next_player.connection_id}")
        return instruction

    def remove_connection(self, connection_id: str) -> Optional[RelayInstruction]:
        with self._lock:
            return self._remove(connection_id)

    def leave_room(self, connection_id: str):
        """Explicit leave: like a disconnect, but leaving without a seat is an error.

        Returns ``(code, instruction)`` where instruction notifies the co-player,
        if any.
        """
        with self._lock:
            code = self._by_connection.get(connection_id)
            if code is None:
                raise RoomNotFoundError()
            return code, self._remove(connection_id)

    def _remove(self, connection_id: str) -> Optional[RelayInstruction]:
        code = self._by_connection.pop(connection_id, None)
        if code is None:
            return None
        room = self._rooms[code]
        departed = room.unseat(connection_id)
        if not room.players:
            del self._rooms[code]
            logger.info(f"[room-close] code={code} last={connection_id}")
            return None
        survivor = room.players[0]
        logger.info(f"[room-leave] code={code} sid={connection_id} remaining={survivor.connection_id}")
        return to_connection(survivor.connection_id, 'playerDisconnected', {'username': departed.username})
