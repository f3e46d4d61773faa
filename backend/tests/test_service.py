import random

import pytest

from wavelength.game import scoring, service


@pytest.fixture()
def room():
    room = service.new_room('R1', rng=random.Random(0))
    service.add_player(room, 'a', 'Alice')
    return room


def _with_players(room, *ids):
    for pid in ids:
        service.add_player(room, pid, pid.upper())
    return room


def test_new_room_starts_awaiting_clue(room):
    assert room.state == 'awaiting_clue'
    assert room.round == 1
    assert room.current_cluegiver == 'a'
    assert room.clue is None
    assert room.guess_position is None
    assert room.revealed is False
    assert 10 <= room.target_position <= 90


def test_add_player_keeps_join_order_and_no_duplicates(room):
    _with_players(room, 'b', 'c')
    service.add_player(room, 'b', 'Bobby')
    assert room.player_ids() == ['a', 'b', 'c']
    assert room.get_player('b').name == 'Bobby'
    assert room.current_cluegiver == 'a'


def test_only_cluegiver_can_submit_clue(room):
    _with_players(room, 'b')
    assert service.submit_clue(room, 'b', 'warm') is False
    assert room.clue is None
    assert room.state == 'awaiting_clue'

    assert service.submit_clue(room, 'a', 'warm') is True
    assert room.clue == 'warm'
    assert room.state == 'clue_given'


def test_second_clue_is_ignored(room):
    service.submit_clue(room, 'a', 'warm')
    assert service.submit_clue(room, 'a', 'cold') is False
    assert room.clue == 'warm'


def test_guess_requires_clue(room):
    _with_players(room, 'b')
    assert service.submit_guess(room, 'b', 50) is False
    assert room.revealed is False
    assert room.guess_position is None


def test_cluegiver_cannot_guess(room):
    _with_players(room, 'b')
    service.submit_clue(room, 'a', 'warm')
    assert service.submit_guess(room, 'a', 50) is False
    assert room.state == 'clue_given'


def test_non_member_cannot_guess(room):
    service.submit_clue(room, 'a', 'warm')
    assert service.submit_guess(room, 'stranger', 50) is False
    assert room.revealed is False


def test_guess_reveals_and_scores(room):
    _with_players(room, 'b')
    room.target_position = 50
    service.submit_clue(room, 'a', 'warm')

    assert service.submit_guess(room, 'b', 53) is True
    assert room.state == 'revealed'
    assert room.revealed is True
    assert room.guess_position == 53
    assert room.score == scoring.score(50, 53) == 3
    assert room.total_score == 3


def test_only_first_guess_counts(room):
    _with_players(room, 'b', 'c')
    service.submit_clue(room, 'a', 'warm')
    service.submit_guess(room, 'b', 30)

    assert service.submit_guess(room, 'c', 70) is False
    assert service.submit_guess(room, 'b', 70) is False
    assert room.guess_position == 30


@pytest.mark.parametrize('raw,expected', [(-20, 0), (140, 100), (42.6, 43), (0, 0), (100, 100)])
def test_guess_position_is_clamped_and_rounded(room, raw, expected):
    _with_players(room, 'b')
    service.submit_clue(room, 'a', 'warm')
    service.submit_guess(room, 'b', raw)
    assert room.guess_position == expected


def test_new_round_rotates_in_join_order(room):
    _with_players(room, 'b', 'c')
    rng = random.Random(5)
    order = []
    for _ in range(4):
        service.start_new_round(room, rng=rng)
        order.append(room.current_cluegiver)
    assert order == ['b', 'c', 'a', 'b']
    assert room.round == 5


def test_new_round_resets_round_state(room):
    _with_players(room, 'b')
    service.submit_clue(room, 'a', 'warm')
    service.submit_guess(room, 'b', room.target_position)
    total = room.total_score

    service.start_new_round(room, rng=random.Random(9))
    assert room.state == 'awaiting_clue'
    assert room.clue is None
    assert room.guess_position is None
    assert room.revealed is False
    assert room.score is None
    assert room.total_score == total == 4
    assert 10 <= room.target_position <= 90


def test_new_round_tolerated_mid_round(room):
    _with_players(room, 'b')
    service.submit_clue(room, 'a', 'warm')
    service.start_new_round(room)
    assert room.state == 'awaiting_clue'
    assert room.clue is None
    assert room.current_cluegiver == 'b'


def test_new_round_falls_back_to_first_player(room):
    _with_players(room, 'b', 'c')
    room.current_cluegiver = 'gone'
    service.start_new_round(room)
    assert room.current_cluegiver == 'a'


def test_cluegiver_leaving_hands_role_to_next_player(room):
    _with_players(room, 'b', 'c')
    service.start_new_round(room)
    assert room.current_cluegiver == 'b'

    assert service.remove_player(room, 'b') is True
    assert room.player_ids() == ['a', 'c']
    assert room.current_cluegiver == 'c'


def test_last_cluegiver_leaving_wraps_to_first(room):
    _with_players(room, 'b', 'c')
    room.current_cluegiver = 'c'
    service.remove_player(room, 'c')
    assert room.current_cluegiver == 'a'


def test_guesser_leaving_keeps_cluegiver(room):
    _with_players(room, 'b')
    service.remove_player(room, 'b')
    assert room.current_cluegiver == 'a'


def test_remove_unknown_player_is_noop(room):
    assert service.remove_player(room, 'nobody') is False
    assert room.player_ids() == ['a']


def test_removing_everyone_clears_cluegiver(room):
    service.remove_player(room, 'a')
    assert room.players == []
    assert room.current_cluegiver is None


def test_public_state_masks_target_until_reveal(room):
    _with_players(room, 'b')
    public = service.room_public_state(room)
    guesser_view = service.room_public_state(room, viewer_id='b')
    cluegiver_view = service.room_public_state(room, viewer_id='a')

    assert 'targetPosition' not in public
    assert 'targetPosition' not in guesser_view
    assert cluegiver_view['targetPosition'] == room.target_position
    assert public['players'] == [{'id': 'a', 'name': 'Alice'}, {'id': 'b', 'name': 'B'}]
    assert public['spectrum'] == {'left': room.spectrum.left, 'right': room.spectrum.right}

    service.submit_clue(room, 'a', 'warm')
    service.submit_guess(room, 'b', 10)
    revealed = service.room_public_state(room, viewer_id='b')
    assert revealed['targetPosition'] == room.target_position
    assert revealed['guessPosition'] == 10
    assert revealed['state'] == 'revealed'
