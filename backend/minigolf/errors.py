class GolfSessionError(Exception):
    """Base error for session state problems.

    ``message`` is the text sent back to the requesting client.
    """
    message = 'Errore di sessione'

    def __init__(self, message=None):
        if message:
            self.message = message
        super().__init__(self.message)


class RoomNotFound(GolfSessionError):
    message = 'Stanza non trovata'


class WrongPassword(GolfSessionError):
    message = 'Password errata'


class PlayerNotFound(GolfSessionError):
    message = 'Giocatore non trovato'
