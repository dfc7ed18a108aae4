from __future__ import annotations

import logging
from dataclasses import dataclass

from reversi_client.protocol.constants import BASE_PORT


@dataclass
class ClientConfig:
    """Settings for one client session, usually filled from the command line."""

    player_number: int
    host: str = "127.0.0.1"
    base_port: int = BASE_PORT
    strategy: str = "random"
    search_depth: int | None = None
    seed: int | None = None
    connect_timeout: float | None = None
    log_level: str = "INFO"
    log_file: str | None = None

    @property
    def port(self) -> int:
        return self.base_port + self.player_number

    def validate(self) -> "ClientConfig":
        if self.player_number not in (1, 2):
            raise ValueError(f"Player number must be 1 or 2, got {self.player_number}")
        if self.search_depth is not None and self.search_depth < 1:
            raise ValueError("Search depth must be at least 1")
        if self.connect_timeout is not None and self.connect_timeout <= 0:
            raise ValueError("Connect timeout must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")
        return self
