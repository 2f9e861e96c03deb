import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import RoomFullError, TurnViolationError

MAX_PLAYERS = 2


class RoomState(str, Enum):
    WAITING = 'waiting'
    ACTIVE = 'active'
    CLOSED = 'closed'


@dataclass
class Player:
    connection_id: str
    username: str
    seat: int

    def to_dict(self):
        return {
            'connection_id': self.connection_id,
            'username': self.username,
            'seat': self.seat,
        }


class Room:
    """A two-seat session: seat assignment, category and turn ownership.

    Seat 0 is the creator and always holds the first turn. A room with fewer
    than two players never accepts actions.
    """

    def __init__(self, code: str, creator_id: str, creator_name: str, category_index: int):
        self.code = code
        self.category_index = category_index
        self.players: List[Player] = [Player(creator_id, creator_name, 0)]
        self.current_turn = 0
        self.created_at = time.time()

    @property
    def state(self) -> RoomState:
        if not self.players:
            return RoomState.CLOSED
        if len(self.players) < MAX_PLAYERS:
            return RoomState.WAITING
        return RoomState.ACTIVE

    @property
    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    def connection_ids(self) -> List[str]:
        return [p.connection_id for p in self.players]

    def player_for(self, connection_id: str) -> Optional[Player]:
        for p in self.players:
            if p.connection_id == connection_id:
                return p
        return None

    def current_player(self) -> Optional[Player]:
        if self.state != RoomState.ACTIVE:
            return None
        return self.players[self.current_turn]

    def seat(self, connection_id: str, username: str) -> Player:
        if self.is_full:
            raise RoomFullError()
        player = Player(connection_id, username, len(self.players))
        self.players.append(player)
        return player

    def take_turn(self, connection_id: str) -> Player:
        """Accept an action from ``connection_id`` and pass the turn.

        Returns the acting player. Raises TurnViolationError, leaving the room
        untouched, if the room is not active or the turn belongs to the other
        seat.
        """
        actor = self.current_player()
        if actor is None or actor.connection_id != connection_id:
            raise TurnViolationError()
        self.current_turn = 1 - self.current_turn
        return actor

    def unseat(self, connection_id: str) -> Optional[Player]:
        player = self.player_for(connection_id)
        if player is None:
            return None
        self.players.remove(player)
        # Survivor moves back to seat 0 and the room waits for a new opponent.
        for idx, p in enumerate(self.players):
            p.seat = idx
        self.current_turn = 0
        return player

    def to_dict(self):
        return {
            'code': self.code,
            'state': self.state.value,
            'category': self.category_index,
            'current_turn': self.current_turn,
            'players': [p.to_dict() for p in self.players],
            'created_at': self.created_at,
        }
