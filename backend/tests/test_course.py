import math

from minigolf.models import Player, Room
from minigolf.services.course import broadcast
from minigolf.services.course.hole import Hole, distance_to_hole, is_hole_completed


def test_hole_inside_radius_fires():
    assert is_hole_completed({'x': 760, 'y': 105})
    assert math.isclose(distance_to_hole({'x': 760, 'y': 105}), math.sqrt(125))


def test_hole_boundary_does_not_fire():
    assert not is_hole_completed({'x': 775, 'y': 100})
    assert not is_hole_completed({'x': 750, 'y': 125})
    assert is_hole_completed({'x': 774.9, 'y': 100})


def test_custom_hole():
    hole = Hole(x=0, y=0, radius=5)
    assert hole.is_completed({'x': 3, 'y': 3})
    assert not is_hole_completed({'x': 3, 'y': 4}, hole)


def _player(**kw):
    defaults = dict(id='sid1', name='Alice', ball_position={'x': 1, 'y': 2}, color='#FF5252')
    defaults.update(kw)
    return Player(**defaults)


def test_players_update_snapshot_fields():
    payload = broadcast.players_update([_player(shots=3)])
    assert payload == [{
        'id': 'sid1',
        'name': 'Alice',
        'ballPosition': {'x': 1, 'y': 2},
        'shots': 3,
        'color': '#FF5252',
        'room': 'public',
    }]


def test_chat_envelopes():
    assert broadcast.player_message('Alice', '<b>ciao</b>') == {
        'player': 'Alice', 'message': '<b>ciao</b>', 'type': 'player',
    }
    joined = broadcast.joined_message(_player())
    assert joined['player'] == 'Sistema'
    assert joined['type'] == 'system'
    assert 'Alice' in joined['message']
    assert '2 colpi' in broadcast.hole_message(_player(shots=2))['message']


def test_shot_relay_and_room_payloads():
    shot = {'startPos': {'x': 0, 'y': 0}, 'endPos': {'x': 5, 'y': 5}, 'power': 7}
    assert broadcast.shot_relay(_player(), shot) == {
        'playerId': 'sid1', 'playerName': 'Alice',
        'startPos': {'x': 0, 'y': 0}, 'endPos': {'x': 5, 'y': 5}, 'power': 7,
    }
    assert broadcast.hole_completed(_player(shots=4)) == {'playerId': 'sid1', 'playerName': 'Alice', 'shots': 4}
    assert broadcast.room_joined(Room('ABC123', 'Sala')) == {'success': True, 'roomName': 'Sala'}
    assert broadcast.room_join_failed('Password errata') == {'success': False, 'error': 'Password errata'}
    assert broadcast.room_created('ABC123') == {'roomId': 'ABC123'}
