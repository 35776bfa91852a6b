import random
import string
from typing import Callable, Dict, Iterator, List, Optional

from minigolf.errors import PlayerNotFound, RoomNotFound, WrongPassword
from minigolf.models import DEFAULT_ROOM, Player, Room, player_color, start_position

ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_room_code(length: int = 6, exists: Optional[Callable[[str], bool]] = None) -> str:
    """Generate a short room code not already taken."""
    while True:
        code = ''.join(random.choices(ROOM_CODE_ALPHABET, k=length))
        if exists is None or not exists(code):
            return code


class PlayerRegistry:
    """Connection id -> Player, in join order."""

    def __init__(self):
        self._players: Dict[str, Player] = {}

    def join(self, connection_id: str, name: Optional[str] = None, room: Optional[str] = None) -> Player:
        # Size is taken before the write, so a re-join counts itself
        index = len(self._players)
        player = Player(
            id=connection_id,
            name=name or f'Giocatore{index + 1}',
            ball_position=start_position(index),
            color=player_color(index),
            room=room or DEFAULT_ROOM,
        )
        self._players[connection_id] = player
        return player

    def get(self, connection_id: str) -> Optional[Player]:
        return self._players.get(connection_id)

    def remove(self, connection_id: str) -> Optional[Player]:
        return self._players.pop(connection_id, None)

    def record_shot(self, connection_id: str, end_pos: Dict[str, float]) -> Optional[Player]:
        player = self._players.get(connection_id)
        if player is None:
            return None
        player.record_shot(end_pos)
        return player

    def list_by_room(self, room_id: str) -> List[Player]:
        return [p for p in self._players.values() if p.room == room_id]

    def __len__(self):
        return len(self._players)

    def __contains__(self, connection_id):
        return connection_id in self._players

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players.values()))


class RoomRegistry:
    """Room id -> Room metadata. The default room always exists."""

    def __init__(self, code_length: int = 6):
        self.code_length = code_length
        self._rooms: Dict[str, Room] = {DEFAULT_ROOM: Room(DEFAULT_ROOM, DEFAULT_ROOM)}

    def create(self, name: Optional[str], password: Optional[str] = None) -> str:
        room_id = generate_room_code(self.code_length, exists=self.__contains__)
        self._rooms[room_id] = Room(room_id, name, password)
        return room_id

    def find(self, room_id: Optional[str]) -> Optional[Room]:
        if not isinstance(room_id, str):
            return None
        return self._rooms.get(room_id)

    def join(self, players: PlayerRegistry, connection_id: str, room_id: str, password: Optional[str] = None) -> Room:
        """Move a player into ``room_id``.

        Raises RoomNotFound, WrongPassword, or PlayerNotFound; the player's
        room is left unchanged on any failure.
        """
        player = players.get(connection_id)
        if player is None:
            raise PlayerNotFound()
        room = self.find(room_id)
        if room is None:
            raise RoomNotFound()
        if not room.check_password(password):
            raise WrongPassword()
        player.room = room.id
        return room

    def __len__(self):
        return len(self._rooms)

    def __contains__(self, room_id):
        return room_id in self._rooms
