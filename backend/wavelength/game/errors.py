"""Room-domain errors surfaced to the originating caller."""

from __future__ import annotations


class RoomError(Exception):
    """Base class for room-domain errors."""

    code = "room_error"
    message = "Room error"


class RoomNotFoundError(RoomError):
    """Raised when a room id is unknown or the room was torn down."""

    code = "room_not_found"
    message = "Room not found"


class RoomAlreadyExistsError(RoomError):
    """Raised when creating a room whose id is already live."""

    code = "room_already_exists"
    message = "Room already exists"


class IllegalActionError(RoomError):
    """Wrong role or state for an action.

    Room operations report this case by returning ``False``; handlers only
    put the code on the acknowledgement and never broadcast it.
    """

    code = "illegal_action"
    message = "Action not allowed"
