from __future__ import annotations

import random

from .models import Player, Room
from .rounds import generate_round
from .scoring import score as score_guess


def new_room(
    room_id: str,
    rng: random.Random | None = None,
    min_target: int | None = None,
    max_target: int | None = None,
) -> Room:
    spectrum, target = generate_round(rng, min_target, max_target)
    return Room(id=room_id, spectrum=spectrum, target_position=target)


def add_player(room: Room, player_id: str, name: str) -> Player:
    with room.lock:
        player = room.get_player(player_id)
        if player is None:
            player = Player(id=player_id, name=name)
            room.players.append(player)
        else:
            player.name = name

        if room.current_cluegiver is None:
            room.current_cluegiver = player_id

        return player


def remove_player(room: Room, player_id: str) -> bool:
    """Remove a player; returns False if they were not a member."""
    with room.lock:
        ids = room.player_ids()
        if player_id not in ids:
            return False

        idx = ids.index(player_id)
        del room.players[idx]

        if not room.players:
            room.current_cluegiver = None
        elif room.current_cluegiver == player_id:
            # The player who followed the departed clue-giver now sits at idx.
            room.current_cluegiver = room.players[idx % len(room.players)].id
        elif room.current_cluegiver not in room.player_ids():
            room.current_cluegiver = room.players[0].id

        return True


def submit_clue(room: Room, player_id: str, clue: str) -> bool:
    with room.lock:
        if room.state != "awaiting_clue":
            return False
        if player_id != room.current_cluegiver:
            return False

        room.clue = clue
        room.state = "clue_given"
        return True


def submit_guess(room: Room, player_id: str, position: float) -> bool:
    with room.lock:
        if room.state != "clue_given" or room.revealed:
            return False
        if player_id == room.current_cluegiver:
            return False
        if room.get_player(player_id) is None:
            return False

        guess = max(0, min(100, int(round(position))))

        room.guess_position = guess
        room.revealed = True
        room.score = score_guess(room.target_position, guess)
        room.total_score += room.score
        room.state = "revealed"
        return True


def start_new_round(
    room: Room,
    rng: random.Random | None = None,
    min_target: int | None = None,
    max_target: int | None = None,
) -> None:
    with room.lock:
        player_ids = room.player_ids()
        if player_ids:
            if room.current_cluegiver in player_ids:
                idx = player_ids.index(room.current_cluegiver)
                room.current_cluegiver = player_ids[(idx + 1) % len(player_ids)]
            else:
                room.current_cluegiver = player_ids[0]
        else:
            room.current_cluegiver = None

        room.spectrum, room.target_position = generate_round(rng, min_target, max_target)
        room.round += 1
        room.clue = None
        room.guess_position = None
        room.revealed = False
        room.score = None
        room.state = "awaiting_clue"


def players_payload(room: Room) -> list[dict]:
    return [{"id": p.id, "name": p.name} for p in room.players]


def room_public_state(room: Room, viewer_id: str | None = None) -> dict:
    with room.lock:
        payload = {
            "id": room.id,
            "state": room.state,
            "round": room.round,
            "players": players_payload(room),
            "currentCluegiver": room.current_cluegiver,
            "spectrum": {"left": room.spectrum.left, "right": room.spectrum.right},
            "clue": room.clue,
            "guessPosition": room.guess_position,
            "revealed": room.revealed,
            "score": room.score,
            "totalScore": room.total_score,
        }

        # The target stays with the clue-giver until the guess is in.
        if room.revealed or (viewer_id is not None and viewer_id == room.current_cluegiver):
            payload["targetPosition"] = room.target_position

        return payload
