from flask import current_app, request
from flask_socketio import emit, join_room, leave_room
from numbers import Real
from typing import Any, Dict, Optional

from minigolf import socketio
from minigolf.errors import PlayerNotFound, RoomNotFound, WrongPassword
from minigolf.models import DEFAULT_ROOM
from minigolf.services.course import broadcast
from minigolf.session import GameSession


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _payload(data) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


def _is_point(value) -> bool:
    if not isinstance(value, dict):
        return False
    return all(
        isinstance(value.get(axis), Real) and not isinstance(value.get(axis), bool)
        for axis in ('x', 'y')
    )


class EventRouter:
    """Socket.IO handlers for one GameSession.

    Every handler takes ``session.lock`` for its whole body. Missing player
    state or malformed payloads make a handler return without emitting.
    """

    def __init__(self, session: GameSession):
        self.session = session

    # ---- helpers ----

    def _broadcast_players(self, room_id: str) -> None:
        emit('players_update', broadcast.players_update(self.session.players.list_by_room(room_id)), to=room_id)

    def _resolve_join_room(self, requested: Optional[str]) -> str:
        if not requested:
            return DEFAULT_ROOM
        if self.session.rooms.find(requested) is None:
            current_app.logger.debug(f"[join] unknown room={requested!r}, using {DEFAULT_ROOM}")
            return DEFAULT_ROOM
        return requested

    # ---- handlers ----

    def handle_connect(self, auth=None):
        current_app.logger.info(f"[connect] sid={_get_sid()}")

    def handle_disconnect(self, reason=None):
        sid = _get_sid()
        with self.session.lock:
            player = self.session.players.remove(sid)
            if player is None:
                return
            leave_room(player.room)
            self._broadcast_players(player.room)
            emit('chat_message', broadcast.left_message(player), to=player.room)
            current_app.logger.info(
                f"[disconnect] player={player.name!r} room={player.room} remaining={len(self.session.players)}"
            )

    def handle_player_join(self, data=None):
        data = _payload(data)
        sid = _get_sid()
        with self.session.lock:
            room_id = self._resolve_join_room(data.get('room'))
            previous = self.session.players.get(sid)
            player = self.session.players.join(sid, name=data.get('name'), room=room_id)
            if previous is not None and previous.room != room_id:
                leave_room(previous.room)
                self._broadcast_players(previous.room)
            join_room(room_id)
            self._broadcast_players(room_id)
            emit('chat_message', broadcast.joined_message(player), to=room_id)
            current_app.logger.info(
                f"[join] player={player.name!r} room={room_id} online={len(self.session.players)}"
            )

    def handle_player_shot(self, data=None):
        data = _payload(data)
        sid = _get_sid()
        end_pos = data.get('endPos')
        if not _is_point(end_pos):
            current_app.logger.debug(f"[shot-drop] sid={sid} malformed endPos={end_pos!r}")
            return
        with self.session.lock:
            player = self.session.players.record_shot(sid, end_pos)
            if player is None:
                current_app.logger.debug(f"[shot-drop] sid={sid} not joined")
                return
            emit('player_shot', broadcast.shot_relay(player, data), to=player.room, include_self=False)
            if self.session.hole.is_completed(player.ball_position):
                emit('hole_completed', broadcast.hole_completed(player), to=player.room)
                emit('chat_message', broadcast.hole_message(player), to=player.room)
                current_app.logger.info(
                    f"[hole] player={player.name!r} room={player.room} shots={player.shots}"
                )

    def handle_chat_message(self, data=None):
        data = _payload(data)
        with self.session.lock:
            player = self.session.players.get(_get_sid())
            if player is None:
                return
            emit('chat_message', broadcast.player_message(player.name, data.get('message')), to=player.room)

    def handle_create_room(self, data=None):
        data = _payload(data)
        with self.session.lock:
            room_id = self.session.rooms.create(data.get('name'), data.get('password'))
        emit('room_created', broadcast.room_created(room_id))
        current_app.logger.info(f"[room-create] room={room_id} name={data.get('name')!r}")

    def handle_join_room(self, data=None):
        data = _payload(data)
        sid = _get_sid()
        with self.session.lock:
            player = self.session.players.get(sid)
            previous_room = player.room if player else None
            try:
                room = self.session.rooms.join(self.session.players, sid, data.get('roomId'), data.get('password'))
            except PlayerNotFound:
                current_app.logger.debug(f"[room-join-drop] sid={sid} not joined")
                return
            except (RoomNotFound, WrongPassword) as exc:
                current_app.logger.info(f"[room-join-fail] sid={sid} room={data.get('roomId')!r} error={exc.message}")
                emit('room_joined', broadcast.room_join_failed(exc.message))
                return
            if previous_room != room.id:
                leave_room(previous_room)
                self._broadcast_players(previous_room)
            join_room(room.id)
            emit('room_joined', broadcast.room_joined(room))
            self._broadcast_players(room.id)
            current_app.logger.info(f"[room-join] player={player.name!r} {previous_room} -> {room.id}")


def register_socketio_handlers(session: GameSession, namespace: str = '/') -> EventRouter:
    """Bind an EventRouter for ``session`` to the shared socketio instance."""
    router = EventRouter(session)
    socketio.on_event('connect', router.handle_connect, namespace=namespace)
    socketio.on_event('disconnect', router.handle_disconnect, namespace=namespace)
    socketio.on_event('player_join', router.handle_player_join, namespace=namespace)
    socketio.on_event('player_shot', router.handle_player_shot, namespace=namespace)
    socketio.on_event('chat_message', router.handle_chat_message, namespace=namespace)
    socketio.on_event('create_room', router.handle_create_room, namespace=namespace)
    socketio.on_event('join_room', router.handle_join_room, namespace=namespace)
    return router
