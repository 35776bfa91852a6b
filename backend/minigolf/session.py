import threading

from minigolf.registry import PlayerRegistry, RoomRegistry
from minigolf.services.course.hole import Hole


class GameSession:
    """Process-wide session state: players, rooms and the course hole.

    Built once by the app factory and handed to the socket handlers and
    routes. ``lock`` serializes handlers so two events never interleave,
    whatever async mode Socket.IO runs in.
    """

    def __init__(self, hole=None, room_code_length=6):
        self.players = PlayerRegistry()
        self.rooms = RoomRegistry(code_length=room_code_length)
        self.hole = hole or Hole()
        self.lock = threading.RLock()

    @classmethod
    def from_config(cls, config):
        hole = Hole(
            x=float(config.get('HOLE_X', 750)),
            y=float(config.get('HOLE_Y', 100)),
            radius=float(config.get('HOLE_RADIUS', 25)),
        )
        return cls(hole=hole, room_code_length=int(config.get('ROOM_CODE_LENGTH', 6)))

    def stats(self):
        return {'players': len(self.players), 'rooms': len(self.rooms)}
