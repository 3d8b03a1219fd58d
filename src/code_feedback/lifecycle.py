# Author: Bradley R. Kinnard - start, wait, stop. in that order.

"""
Process lifecycle: logging up, server on a background thread, main thread parked
until SIGINT/SIGTERM, then a bounded drain. Only a failed start is fatal.
"""

import logging
import signal
import sys
import threading

from src.code_feedback.config import Settings
from src.code_feedback.logging_config import setup_logging
from src.code_feedback.server import FeedbackServer, ServerStartupError, ShutdownTimeoutError

log = logging.getLogger(__name__)

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)
ALIVE_CHECK = 0.5  # seconds, how often the signal wait peeks at the server thread


def wait_for_signal(server: FeedbackServer | None = None) -> int | None:
    """
    Block until SIGINT or SIGTERM. One signal is enough, no escalation.
    Returns the signal number, or None if the server thread died first.
    Previous handlers are put back before returning.
    """
    received: list[int] = []
    stop = threading.Event()

    def handle_signal(sig, frame):
        received.append(sig)
        stop.set()

    previous = {sig: signal.signal(sig, handle_signal) for sig in HANDLED_SIGNALS}
    try:
        while not stop.wait(ALIVE_CHECK):
            if server is not None and not server.is_alive:
                log.error("server thread exited on its own, shutting down")
                return None
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    return received[0]


def run(app, settings: Settings) -> None:
    """the whole process. returns normally after shutdown, exits 1 if the server never started"""
    setup_logging(level=settings.log_level)

    server = FeedbackServer(app, settings.host, settings.port, shutdown_timeout=settings.shutdown_timeout)
    try:
        server.start()
    except ServerStartupError as e:
        log.critical(f"Error starting server: {e}")
        sys.exit(1)

    log.info(f"Server listening on port {server.bound_port or settings.port}...")

    sig = wait_for_signal(server)
    if sig is not None:
        log.info(f"got signal {signal.Signals(sig).name}")

    log.info("Shutting down server...")
    try:
        server.shutdown(settings.shutdown_timeout)
    except ShutdownTimeoutError as e:
        log.error(f"Error shutting down server: {e}")
    log.info("Server shut down successfully.")
