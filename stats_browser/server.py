from __future__ import annotations

import logging
import socket

logger = logging.getLogger(__name__)

PORT_SEARCH_ATTEMPTS = 100


def find_free_port(start_port: int, attempts: int = PORT_SEARCH_ATTEMPTS, host: str = "localhost") -> int:
    """
    First port at or above start_port that nothing on host accepts
    connections on. Falls back to start_port when all attempts are taken,
    so the server start reports the clash itself.
    """
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    logger.warning("No free port in %d..%d", start_port, start_port + attempts - 1)
    return start_port
