"""Process entry point: bind, serve, drain on SIGTERM/SIGINT, exit 0."""

import signal
import sys

import uvicorn

from womm.config import Settings
from womm.lifecycle import Lifecycle, LifecycleState
from womm.main import create_app, setup_logging


class ServiceServer(uvicorn.Server):
    """uvicorn server whose listener state is tracked by a Lifecycle."""

    def __init__(self, config: uvicorn.Config, lifecycle: Lifecycle):
        super().__init__(config)
        self.lifecycle = lifecycle

    async def startup(self, sockets=None) -> None:
        # uvicorn exits the process itself if the bind fails.
        await super().startup(sockets=sockets)
        if self.started:
            self.lifecycle.mark_listening()

    def handle_exit(self, sig: int, frame) -> None:
        # Both signals drain the same way; repeats are ignored and nothing is
        # re-raised after shutdown, so the process exits 0.
        if self.lifecycle.begin_draining(signal.Signals(sig).name):
            self.should_exit = True

    async def shutdown(self, sockets=None) -> None:
        # Closes the listener and waits for in-flight requests, no timeout.
        await super().shutdown(sockets=sockets)
        if self.lifecycle.state is LifecycleState.DRAINING:
            self.lifecycle.mark_stopped()


def build_server(settings: Settings) -> ServiceServer:
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
        timeout_graceful_shutdown=None,
    )
    return ServiceServer(config, Lifecycle(settings.port))


def main() -> int:
    settings = Settings()
    setup_logging(settings.log_level)
    server = build_server(settings)
    server.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
