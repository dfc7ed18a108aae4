class ReversiError(Exception):
    """Base class for every error raised by the client."""


class ConnectError(ReversiError):
    """The server could not be reached or refused the connection."""


class TransportError(ReversiError):
    """Reading from or writing to an established connection failed."""


class ProtocolError(ReversiError):
    """A server message was malformed or unexpected."""


class IllegalMoveError(ReversiError):
    """A move was applied without being legal on the current board."""


class InvalidStrategyMoveError(ReversiError):
    """A strategy returned a move outside the legal moves it was given."""

    def __init__(self, move, valid_moves):
        self.move = move
        self.valid_moves = list(valid_moves)
        super().__init__(f"Strategy chose {move!r}, which is not one of {self.valid_moves!r}")
