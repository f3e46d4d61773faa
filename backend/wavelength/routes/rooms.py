from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from ..game import service
from ..game.errors import RoomNotFoundError
from ..game.registry import REGISTRY_EXTENSION

bp = Blueprint("rooms", __name__)


@bp.get("/rooms/<path:room_id>")
def get_room(room_id: str):
    # Rooms are created over the socket; this is a read-only, masked view.
    registry = current_app.extensions[REGISTRY_EXTENSION]
    try:
        room = registry.get(room_id)
    except RoomNotFoundError:
        return jsonify({"error": "room_not_found"}), 404
    return jsonify(service.room_public_state(room))
