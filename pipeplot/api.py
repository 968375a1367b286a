from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from pipeplot_core.config import SessionConfig, config_from_env
from pipeplot_core.transport import PipeTransport, Transport

from pipeplot.session import PlotSession


def connect(config: SessionConfig | None = None) -> PipeTransport:
    config = config or config_from_env()
    return PipeTransport.connect(
        config.executable,
        keep_alive_after_exit=config.persist,
        close_timeout_s=config.close_timeout_s,
        teardown_delay_s=config.teardown_delay_s,
    )


@contextmanager
def open_session(
    config: SessionConfig | None = None,
    *,
    transport: Transport | None = None,
) -> Iterator[PlotSession]:
    config = config or config_from_env()
    session = PlotSession(transport if transport is not None else connect(config), config=config)
    try:
        session.start()
        yield session
    finally:
        session.close()
