"""
Process entry point.

Binds the listening socket, logs the listen address and serves the
application with uvicorn. A failure to bind is fatal.

Usage:
    python -m greeter
    greeter
"""

import socket
import sys

import structlog
import uvicorn

from greeter.core.config import Settings, settings
from greeter.main import app
from greeter.shared.errors import ListenError

logger = structlog.get_logger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """Open a listening TCP socket on ``host:port``.

    Raises:
        ListenError: If the address cannot be bound.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen()
    except OSError as exc:
        sock.close()
        raise ListenError(f"{host}:{port}", exc.strerror or str(exc)) from exc
    sock.set_inheritable(True)
    return sock


def serve(config: Settings = settings) -> None:
    """Bind the listener and serve the application until shutdown.

    Raises:
        ListenError: If the listener cannot be started.
    """
    sock = bind_socket(config.host, config.port)
    logger.info("HTTP", addr=config.listen_addr)
    server = uvicorn.Server(
        uvicorn.Config(app, log_level=config.log_level.lower(), log_config=None)
    )
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    try:
        serve()
    except ListenError as exc:
        logger.critical("listen failed", err=exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
