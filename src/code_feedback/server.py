# Author: Bradley R. Kinnard - the part that actually listens

"""
uvicorn on a background thread so the main thread is free to wait on signals.

State only moves forward: STARTING -> RUNNING -> DRAINING -> STOPPED.
uvicorn skips its own signal handling off the main thread, so shutdown is
entirely ours to trigger.
"""

import threading
import time
from enum import Enum

import uvicorn

STARTUP_POLL = 0.01  # seconds between "are we bound yet" checks


class ServerState(str, Enum):
    STARTING = "starting"
    RUNNING = "running"
    DRAINING = "draining"
    STOPPED = "stopped"


class ServerStartupError(RuntimeError):
    """server thread died before it was accepting connections. bind failure, usually"""


class ShutdownTimeoutError(TimeoutError):
    """in-flight requests outlived the drain deadline and got abandoned"""


class FeedbackServer:
    """
    Thin owner of a uvicorn.Server.

    start() blocks until the listener is bound or the thread is dead.
    shutdown(timeout) stops accepting, drains, and gives up after `timeout` seconds.
    """

    def __init__(self, app, host: str, port: int, shutdown_timeout: float = 5.0):
        self.shutdown_timeout = shutdown_timeout
        config = uvicorn.Config(
            app,
            host=host,
            port=port,
            log_config=None,  # logging_config owns the handlers
            access_log=False,  # successful requests log nothing
            timeout_graceful_shutdown=None,  # the drain deadline lives in shutdown()
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(target=self._server.run, name="http-server", daemon=True)
        self.state = ServerState.STARTING

    @property
    def is_alive(self) -> bool:
        return self._thread.is_alive()

    @property
    def bound_port(self) -> int | None:
        """actual port once RUNNING. handy when configured with port 0"""
        servers = getattr(self._server, "servers", None)
        if not servers:
            return None
        for srv in servers:
            for sock in srv.sockets:
                return sock.getsockname()[1]
        return None

    def start(self) -> None:
        """spawn the thread, wait for bind + lifespan startup. raises ServerStartupError"""
        if self.state is not ServerState.STARTING:
            raise RuntimeError(f"can't start a server that is {self.state.value}")

        self._thread.start()
        while not self._server.started:
            if not self._thread.is_alive():
                self.state = ServerState.STOPPED
                raise ServerStartupError(
                    f"server failed to start on {self._server.config.host}:{self._server.config.port}"
                )
            time.sleep(STARTUP_POLL)

        self.state = ServerState.RUNNING

    def shutdown(self, timeout: float | None = None) -> None:
        """
        Stop accepting, wait for in-flight requests, STOPPED either way.
        Raises ShutdownTimeoutError if the drain didn't finish before the deadline.
        """
        if self.state is ServerState.STOPPED:
            return
        if timeout is None:
            timeout = self.shutdown_timeout

        self.state = ServerState.DRAINING
        deadline = time.monotonic() + timeout
        self._server.should_exit = True

        self._thread.join(max(0.0, deadline - time.monotonic()))
        # stragglers stay on the daemon thread uncancelled, lifespan shutdown runs once they finish
        self.state = ServerState.STOPPED
        if self._thread.is_alive():
            raise ShutdownTimeoutError(f"in-flight requests still running after {timeout}s, abandoned")
