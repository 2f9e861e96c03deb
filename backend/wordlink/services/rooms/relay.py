from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class RelayInstruction:
    """An event, its payload and the connections it must reach."""

    event: str
    payload: Dict[str, Any] = field(default_factory=dict)
    targets: Tuple[str, ...] = ()


def to_connection(connection_id: str, event: str, payload: Dict[str, Any]) -> RelayInstruction:
    return RelayInstruction(event, payload, (connection_id,))


def to_room(connection_ids: Iterable[str], event: str, payload: Dict[str, Any]) -> RelayInstruction:
    return RelayInstruction(event, payload, tuple(connection_ids))


def error(connection_id: str, reason: str) -> RelayInstruction:
    return to_connection(connection_id, 'error', {'reason': reason})


class EventRelay:
    """Deliver relay instructions through a transport."""

    def emit(self, connection_id: str, event: str, payload: Dict[str, Any]) -> None:
        raise NotImplementedError

    def deliver(self, *instructions: RelayInstruction) -> None:
        for instruction in instructions:
            if instruction is None:
                continue
            for target in instruction.targets:
                self.emit(target, instruction.event, instruction.payload)


class SocketIORelay(EventRelay):
    """Emit to individual Socket.IO sids on one namespace."""

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def emit(self, connection_id, event, payload):
        self.socketio.emit(event, payload, to=connection_id, namespace=self.namespace)
