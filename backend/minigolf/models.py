from typing import Any, Dict, Optional

DEFAULT_ROOM = 'public'
PALETTE = ['#FF5252', '#2196F3', '#4CAF50', '#FF9800', '#9C27B0', '#00BCD4']

# Tee position of the first player; later players are spaced along x
START_X = 50
START_Y = 450
START_SPACING = 30


def player_color(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


def start_position(index: int) -> Dict[str, float]:
    return {'x': START_X + index * START_SPACING, 'y': START_Y}


class Player:
    def __init__(self, id, name, ball_position, color, room=DEFAULT_ROOM, shots=0):
        self.id = id
        self.name = name
        self.ball_position = ball_position
        self.color = color
        self.room = room
        self.shots = shots

    def record_shot(self, end_pos: Dict[str, float]) -> None:
        self.ball_position = {'x': end_pos['x'], 'y': end_pos['y']}
        self.shots += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'ballPosition': dict(self.ball_position),
            'shots': self.shots,
            'color': self.color,
            'room': self.room,
        }

    def __repr__(self):
        return f'<Player {self.id} {self.name!r} room={self.room}>'


class Room:
    """Room metadata. Membership lives on ``Player.room``."""

    def __init__(self, id: str, name: str, password: Optional[str] = None):
        self.id = id
        self.name = name
        self.password = password

    @property
    def has_password(self) -> bool:
        return bool(self.password)

    def check_password(self, candidate: Optional[str]) -> bool:
        if not self.has_password:
            return True
        return candidate == self.password

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'has_password': self.has_password,
        }

    def __repr__(self):
        return f'<Room {self.id} {self.name!r}>'
