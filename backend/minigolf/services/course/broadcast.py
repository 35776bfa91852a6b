from typing import Any, Dict, Iterable, List

from minigolf.models import Player, Room

SYSTEM_SENDER = 'Sistema'


def players_update(players: Iterable[Player]) -> List[Dict[str, Any]]:
    return [p.to_dict() for p in players]


def system_message(text: str) -> Dict[str, Any]:
    return {'player': SYSTEM_SENDER, 'message': text, 'type': 'system'}


def player_message(name: str, text: Any) -> Dict[str, Any]:
    # Free text is relayed untouched
    return {'player': name, 'message': text, 'type': 'player'}


def joined_message(player: Player) -> Dict[str, Any]:
    return system_message(f'🎮 {player.name} si è unito alla partita!')


def left_message(player: Player) -> Dict[str, Any]:
    return system_message(f'👋 {player.name} ha lasciato la partita')


def hole_message(player: Player) -> Dict[str, Any]:
    return system_message(f'🎉 {player.name} ha completato la buca in {player.shots} colpi!')


def shot_relay(player: Player, shot: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'playerId': player.id,
        'playerName': player.name,
        'startPos': shot.get('startPos'),
        'endPos': shot.get('endPos'),
        'power': shot.get('power'),
    }


def hole_completed(player: Player) -> Dict[str, Any]:
    return {'playerId': player.id, 'playerName': player.name, 'shots': player.shots}


def room_created(room_id: str) -> Dict[str, Any]:
    return {'roomId': room_id}


def room_joined(room: Room) -> Dict[str, Any]:
    return {'success': True, 'roomName': room.name}


def room_join_failed(error: str) -> Dict[str, Any]:
    return {'success': False, 'error': error}
