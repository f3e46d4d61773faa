from __future__ import annotations

import logging
import math
from typing import Any

from flask import current_app, request
from flask_socketio import SocketIO, emit, join_room, leave_room

from ..config import Config
from ..game import service
from ..game.errors import IllegalActionError, RoomError, RoomNotFoundError
from ..game.registry import RoomRegistry
from . import events


logger = logging.getLogger(__name__)


def _config(key: str) -> Any:
    return current_app.config.get(key, getattr(Config, key))


def _validate_room_id(room_id: Any) -> bool:
    # Room ids are taken verbatim: no stripping, case-sensitive.
    return isinstance(room_id, str) and bool(room_id)


def _validate_text(text: Any, max_length: int) -> bool:
    if not isinstance(text, str):
        return False
    n = text.strip()
    if not n:
        return False
    if len(n) > max_length:
        return False
    # Avoid obvious HTML/script injection.
    if "<" in n or ">" in n:
        return False
    # No control characters.
    for ch in n:
        if ord(ch) < 32:
            return False
    return True


def _validate_name(name: Any) -> bool:
    return _validate_text(name, _config("MAX_NAME_LENGTH"))


def _validate_clue(clue: Any) -> bool:
    return _validate_text(clue, _config("MAX_CLUE_LENGTH"))


def _parse_position(raw: Any) -> float | None:
    if isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def register_socketio_handlers(socketio: SocketIO, registry: RoomRegistry) -> None:
    def _error(code: str, message: str) -> dict:
        # Errors go to the originating connection only.
        emit(events.ROOM_ERROR, {"error": code, "message": message})
        return {"ok": False, "error": code}

    def _room_error(exc: RoomError) -> dict:
        return _error(exc.code, exc.message)

    def _invalid_payload() -> dict:
        return _error("invalid_payload", "Invalid payload")

    def _ignored(action: str, room_id: str) -> dict:
        logger.debug("ignored %s from %s in room %r", action, request.sid, room_id)
        return {"ok": False, "error": IllegalActionError.code}

    def _payload(data: Any) -> dict:
        return data if isinstance(data, dict) else {}

    def _emit_per_viewer(event: str, room_id: str, public: dict, private: dict, cluegiver: str | None) -> None:
        """Send the masked view to the room and the full view to the clue-giver."""
        if cluegiver:
            socketio.emit(event, {"room": public}, to=room_id, skip_sid=cluegiver)
            socketio.emit(event, {"room": private}, to=cluegiver)
        else:
            socketio.emit(event, {"room": public}, to=room_id)

    def _leave(room_id: str, sid: str) -> None:
        try:
            with registry.lock_room(room_id) as room:
                previous_cluegiver = room.current_cluegiver
                if registry.leave(room_id, sid) is None:
                    return
                torn_down = room.closed
                cluegiver = room.current_cluegiver
                membership = {
                    "players": service.players_payload(room),
                    "currentCluegiver": cluegiver,
                }
                private = None
                if cluegiver and cluegiver != previous_cluegiver:
                    private = service.room_public_state(room, viewer_id=cluegiver)
        except RoomNotFoundError:
            return

        leave_room(room_id, sid=sid)
        if torn_down:
            return

        socketio.emit(events.ROOM_LEFT, membership, to=room_id)
        if private is not None:
            # The new clue-giver needs the hidden target.
            socketio.emit(events.ROOM_STATE, {"room": private}, to=cluegiver)

    def _leave_other_rooms(sid: str, keep_room_id: str | None = None) -> None:
        for room in registry.list_rooms():
            if room.id != keep_room_id and sid in room.player_ids():
                _leave(room.id, sid)

    @socketio.on(events.ROOM_CREATE)
    def room_create(data):
        payload = _payload(data)
        room_id = payload.get("roomId")
        name = payload.get("name")

        if not _validate_room_id(room_id) or not _validate_name(name):
            return _invalid_payload()
        name = name.strip()

        sid = request.sid
        try:
            room = registry.create(room_id, sid, name)
        except RoomError as exc:
            return _room_error(exc)

        _leave_other_rooms(sid, keep_room_id=room_id)
        join_room(room_id)

        emit(
            events.ROOM_JOINED,
            {"roomId": room_id, "playerId": sid, "room": service.room_public_state(room, viewer_id=sid)},
        )
        return {"ok": True}

    @socketio.on(events.ROOM_JOIN)
    def room_join(data):
        payload = _payload(data)
        room_id = payload.get("roomId")
        name = payload.get("name")

        if not _validate_room_id(room_id) or not _validate_name(name):
            return _invalid_payload()
        name = name.strip()

        sid = request.sid
        try:
            with registry.lock_room(room_id) as room:
                registry.join(room_id, sid, name)
                snapshot = service.room_public_state(room, viewer_id=sid)
                membership = {
                    "players": service.players_payload(room),
                    "currentCluegiver": room.current_cluegiver,
                }
        except RoomError as exc:
            return _room_error(exc)

        _leave_other_rooms(sid, keep_room_id=room_id)
        join_room(room_id)

        emit(events.ROOM_JOINED, {"roomId": room_id, "playerId": sid, "room": snapshot})
        socketio.emit(events.ROOM_PLAYERS, membership, to=room_id)
        return {"ok": True}

    @socketio.on(events.ROOM_LEAVE)
    def room_leave(data):
        payload = _payload(data)
        room_id = payload.get("roomId")
        if not _validate_room_id(room_id):
            return _invalid_payload()

        _leave(room_id, request.sid)
        return {"ok": True}

    @socketio.on(events.CLUE_SUBMIT)
    def clue_submit(data):
        payload = _payload(data)
        room_id = payload.get("roomId")
        clue = payload.get("clue")

        if not _validate_room_id(room_id) or not _validate_clue(clue):
            return _invalid_payload()
        clue = clue.strip()

        sid = request.sid
        try:
            with registry.lock_room(room_id) as room:
                if room.get_player(sid) is None or not service.submit_clue(room, sid, clue):
                    return _ignored(events.CLUE_SUBMIT, room_id)
                result = {"clue": room.clue, "state": room.state}
        except RoomError as exc:
            return _room_error(exc)

        logger.info("clue submitted in room %r: %s", room_id, clue)
        socketio.emit(events.CLUE_SUBMITTED, result, to=room_id)
        return {"ok": True}

    @socketio.on(events.GUESS_SUBMIT)
    def guess_submit(data):
        payload = _payload(data)
        room_id = payload.get("roomId")
        if not _validate_room_id(room_id):
            return _invalid_payload()

        position = _parse_position(payload.get("position"))
        if position is None:
            return _error("invalid_position", "Invalid position")

        sid = request.sid
        try:
            with registry.lock_room(room_id) as room:
                if not service.submit_guess(room, sid, position):
                    return _ignored(events.GUESS_SUBMIT, room_id)
                result = {
                    "guessPosition": room.guess_position,
                    "targetPosition": room.target_position,
                    "revealed": room.revealed,
                    "score": room.score,
                    "totalScore": room.total_score,
                }
        except RoomError as exc:
            return _room_error(exc)

        logger.info(
            "guess %s in room %r scored %s (target %s)",
            result["guessPosition"], room_id, result["score"], result["targetPosition"],
        )
        socketio.emit(events.GUESS_SUBMITTED, result, to=room_id)
        return {"ok": True}

    @socketio.on(events.ROUND_NEW)
    def round_new(data):
        payload = _payload(data)
        room_id = payload.get("roomId")
        if not _validate_room_id(room_id):
            return _invalid_payload()

        sid = request.sid
        try:
            with registry.lock_room(room_id) as room:
                if room.get_player(sid) is None:
                    return _ignored(events.ROUND_NEW, room_id)
                registry.start_new_round(room)
                cluegiver = room.current_cluegiver
                public = service.room_public_state(room)
                private = service.room_public_state(room, viewer_id=cluegiver)
        except RoomError as exc:
            return _room_error(exc)

        logger.info("round %s started in room %r, clue-giver %s", public["round"], room_id, cluegiver)
        _emit_per_viewer(events.ROUND_STARTED, room_id, public, private, cluegiver)
        return {"ok": True}

    @socketio.on("disconnect")
    def on_disconnect(reason=None):
        sid = request.sid
        logger.info("connection %s closed (%s)", sid, reason)
        # A connection belongs to at most one room, but scan them all anyway.
        _leave_other_rooms(sid)
