"""Process entry point: bind the listener, then hand it to uvicorn.

Binding happens here rather than inside uvicorn so a taken port is
reported as a :class:`BindError` and the process exits non-zero
straight away.
"""

import copy
import logging
import signal
import socket
import sys

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from asset_server.config import Settings, build_settings
from asset_server.main import create_app

logger = logging.getLogger("asset_server")


class BindError(OSError):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, reason: OSError):
        super().__init__(reason.errno, f"Cannot bind {host}:{port}: {reason.strerror or reason}")
        self.host = host
        self.port = port


def open_listener(host: str, port: int) -> socket.socket:
    """Bind and listen on ``host:port``. No retry, no fallback port."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(2048)
    except OSError as e:
        sock.close()
        raise BindError(host, port, e) from e
    sock.set_inheritable(True)
    return sock


def log_config(level: str) -> dict:
    """uvicorn's logging config with the asset_server logger added."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"]["asset_server"] = {
        "handlers": ["default"],
        "level": level.upper(),
    }
    return config


def serve(settings: Settings) -> None:
    """Serve until uvicorn receives SIGINT/SIGTERM."""
    config = uvicorn.Config(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=log_config(settings.LOG_LEVEL),
    )
    sock = open_listener(settings.HOST, settings.PORT)
    port = sock.getsockname()[1]
    logger.info(f"Server is running on http://localhost:{port}")
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def _stop(signum, frame):
    raise SystemExit(0)


def main() -> None:
    settings = build_settings()
    # uvicorn restores this handler and re-raises SIGTERM after its graceful shutdown.
    signal.signal(signal.SIGTERM, _stop)
    try:
        serve(settings)
    except BindError as e:
        logger.error(f"{e.strerror}; is another server already running?")
        sys.exit(1)
    except KeyboardInterrupt:
        # SIGINT, re-raised the same way once shutdown has finished
        pass
    sys.exit(0)


if __name__ == "__main__":
    main()
