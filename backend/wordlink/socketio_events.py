import functools

from flask import current_app, request

from wordlink import get_registry, get_relay, socketio
from wordlink.services.rooms import RoomError, ValidationError
from wordlink.services.rooms import messages, relay


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _handler(event: str):
    """Run an event handler for the calling sid and report failures to it only.

    Request errors become an ``error`` event. Anything unexpected is logged and
    reported the same way so one bad payload cannot take down the dispatcher.
    """
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(data=None, *_):
            sid = _get_sid()
            try:
                fn(sid, messages.parse(event, data))
            except RoomError as exc:
                current_app.logger.info(f"[request-error] event={event} sid={sid} reason={exc.reason}")
                get_relay(current_app).deliver(relay.error(sid, exc.reason))
            except Exception:
                current_app.logger.exception(f"[request-fault] event={event} sid={sid}")
                get_relay(current_app).deliver(relay.error(sid, ValidationError.reason))
        return wrapper
    return decorator


def handle_connect(auth=None):
    sid = _get_sid()
    current_app.logger.info(f"[connect] sid={sid}")
    get_relay(current_app).deliver(relay.to_connection(sid, 'connected', {'connectionId': sid}))


def handle_disconnect(reason=None):
    sid = _get_sid()
    current_app.logger.info(f"[disconnect] sid={sid} reason={reason}")
    try:
        notice = get_registry(current_app).remove_connection(sid)
    except Exception:
        current_app.logger.exception(f"[request-fault] event=disconnect sid={sid}")
        return
    get_relay(current_app).deliver(notice)


@_handler('createRoom')
def handle_create_room(sid, msg):
    code = get_registry(current_app).create_room(sid, msg.username)
    get_relay(current_app).deliver(relay.to_connection(sid, 'roomCreated', {'code': code}))


@_handler('joinRoom')
def handle_join_room(sid, msg):
    joined = get_registry(current_app).join_room(msg.code, msg.username, sid)
    get_relay(current_app).deliver(
        relay.to_connection(sid, 'roomJoined', {
            'code': joined.code,
            'category': joined.category_index,
            'categoryName': joined.category_name,
        }),
        relay.to_room(joined.connection_ids, 'startGame', {
            'category': joined.category_index,
            'categoryName': joined.category_name,
            'starterConnectionId': joined.starter_connection_id,
        }),
    )


@_handler('gameAction')
def handle_game_action(sid, msg):
    get_relay(current_app).deliver(get_registry(current_app).handle_action(sid, msg.term))


@_handler('leaveRoom')
def handle_leave_room(sid, msg):
    code, notice = get_registry(current_app).leave_room(sid)
    get_relay(current_app).deliver(
        relay.to_connection(sid, 'roomLeft', {'code': code}),
        notice,
    )


def register_socketio_handlers(namespace: str = '/') -> None:
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('createRoom', handle_create_room, namespace=namespace)
    socketio.on_event('joinRoom', handle_join_room, namespace=namespace)
    socketio.on_event('gameAction', handle_game_action, namespace=namespace)
    socketio.on_event('leaveRoom', handle_leave_room, namespace=namespace)
