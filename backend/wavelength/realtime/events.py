from __future__ import annotations

# Client -> server
ROOM_CREATE = "room:create"
ROOM_JOIN = "room:join"
ROOM_LEAVE = "room:leave"
CLUE_SUBMIT = "clue:submit"
GUESS_SUBMIT = "guess:submit"
ROUND_NEW = "round:new"

# Server -> client
ROOM_JOINED = "room:joined"
ROOM_PLAYERS = "room:players"
ROOM_LEFT = "room:left"
ROOM_STATE = "room:state"
ROOM_ERROR = "room:error"
CLUE_SUBMITTED = "clue:submitted"
GUESS_SUBMITTED = "guess:submitted"
ROUND_STARTED = "round:new"
