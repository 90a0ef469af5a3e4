"""Server lifecycle state: STARTING -> LISTENING -> DRAINING -> STOPPED."""

import enum
import logging

logger = logging.getLogger(__name__)

DIAGNOSTIC_PATHS = {
    "Health check": "/health",
    "Readiness": "/ready",
    "Metrics": "/metrics",
    "Version": "/version",
}


class LifecycleState(str, enum.Enum):
    STARTING = "starting"
    LISTENING = "listening"
    DRAINING = "draining"
    STOPPED = "stopped"


class InvalidTransition(RuntimeError):
    """Raised when a lifecycle step is taken out of order."""


class Lifecycle:
    """Owns the process-wide listener state.

    Shutdown begins at most once: a second termination signal while draining
    is ignored, there is no forced-exit path.
    """

    def __init__(self, port: int):
        self.port = port
        self.state = LifecycleState.STARTING

    def _move(self, expected: LifecycleState, target: LifecycleState) -> None:
        if self.state is not expected:
            raise InvalidTransition(
                f"Cannot move to {target.value} from {self.state.value}"
            )
        self.state = target

    def mark_listening(self) -> None:
        self._move(LifecycleState.STARTING, LifecycleState.LISTENING)
        base = f"http://localhost:{self.port}"
        logger.info(f"Server is running on {base}")
        for label, path in DIAGNOSTIC_PATHS.items():
            logger.info(f"{label}: {base}{path}")

    def begin_draining(self, signal_name: str) -> bool:
        """Start shutdown. Returns False if it has already started."""
        if self.state in (LifecycleState.DRAINING, LifecycleState.STOPPED):
            return False
        logger.info(f"{signal_name} received, shutting down gracefully")
        self.state = LifecycleState.DRAINING
        return True

    def mark_stopped(self) -> None:
        self._move(LifecycleState.DRAINING, LifecycleState.STOPPED)
        logger.info("Server closed")
