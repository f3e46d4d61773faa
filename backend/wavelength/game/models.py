from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock
from typing import Literal


RoomState = Literal["awaiting_clue", "clue_given", "revealed"]


@dataclass(frozen=True)
class Spectrum:
    left: str
    right: str


@dataclass
class Player:
    id: str
    name: str


@dataclass
class Room:
    id: str
    spectrum: Spectrum
    target_position: int
    state: RoomState = "awaiting_clue"
    round: int = 1
    players: list[Player] = field(default_factory=list)
    current_cluegiver: str | None = None
    clue: str | None = None
    guess_position: int | None = None
    revealed: bool = False
    score: int | None = None
    total_score: int = 0
    # Set once the room has been torn down; late actions treat it as gone.
    closed: bool = False
    lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    def player_ids(self) -> list[str]:
        return [p.id for p in self.players]

    def get_player(self, player_id: str) -> Player | None:
        for p in self.players:
            if p.id == player_id:
                return p
        return None
