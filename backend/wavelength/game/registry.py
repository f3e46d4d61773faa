"""Process-wide registry of live rooms."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from contextlib import contextmanager
from threading import RLock

from . import service
from .errors import RoomAlreadyExistsError, RoomNotFoundError
from .models import Room


logger = logging.getLogger(__name__)

# Key under Flask app.extensions
REGISTRY_EXTENSION = "wavelength.registry"


class RoomRegistry:
    """Owns the room-id -> Room mapping.

    The registry lock only guards the mapping itself; each room carries its
    own lock for state changes, so rooms never wait on each other.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        min_target: int | None = None,
        max_target: int | None = None,
    ) -> None:
        self._lock = RLock()
        self._rooms: dict[str, Room] = {}
        self.rng = rng
        self.min_target = min_target
        self.max_target = max_target

    def start_new_round(self, room: Room) -> None:
        service.start_new_round(room, rng=self.rng, min_target=self.min_target, max_target=self.max_target)

    def create(self, room_id: str, player_id: str, name: str) -> Room:
        """Create a room with its creator as sole member and clue-giver."""
        with self._lock:
            if room_id in self._rooms:
                raise RoomAlreadyExistsError(f"room_id={room_id!r} already exists")

            room = service.new_room(
                room_id, rng=self.rng, min_target=self.min_target, max_target=self.max_target
            )
            service.add_player(room, player_id, name)
            self._rooms[room_id] = room

        logger.info("room %r created by %s (%s)", room_id, player_id, name)
        return room

    def get(self, room_id: str) -> Room:
        with self._lock:
            room = self._rooms.get(room_id)
        if room is None:
            raise RoomNotFoundError(f"room_id={room_id!r} not found")
        return room

    def remove(self, room_id: str) -> bool:
        with self._lock:
            room = self._rooms.pop(room_id, None)
        if room is None:
            return False
        room.closed = True
        logger.info("room %r deleted (empty)", room_id)
        return True

    def list_rooms(self) -> list[Room]:
        with self._lock:
            return list(self._rooms.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    @contextmanager
    def lock_room(self, room_id: str) -> Iterator[Room]:
        """Yield a live room while holding its lock."""
        room = self.get(room_id)
        with room.lock:
            if room.closed:
                raise RoomNotFoundError(f"room_id={room_id!r} not found")
            yield room

    def join(self, room_id: str, player_id: str, name: str) -> Room:
        with self.lock_room(room_id) as room:
            service.add_player(room, player_id, name)
        logger.info("%s (%s) joined room %r", player_id, name, room_id)
        return room

    def leave(self, room_id: str, player_id: str) -> Room | None:
        """Remove a player, tearing the room down once it is empty.

        Returns None when the player was not a member of the room.
        """
        with self.lock_room(room_id) as room:
            if not service.remove_player(room, player_id):
                return None
            if not room.players:
                self.remove(room_id)
        logger.info("%s left room %r", player_id, room_id)
        return room
