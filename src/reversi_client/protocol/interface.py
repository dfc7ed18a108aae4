from abc import ABC, abstractmethod


class Transport(ABC):
    """
    Abstract line-oriented connection to the game server.
    This decouples the turn loop from whether messages arrive over a TCP
    socket or an in-process pair used in tests.
    """

    @abstractmethod
    def recv_line(self) -> str:
        """Return the next line from the server, without its newline."""

    @abstractmethod
    def send_text(self, text: str):
        """Send already-encoded text to the server."""

    @abstractmethod
    def close(self):
        """Release the connection. Safe to call more than once."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
