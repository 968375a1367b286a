from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import os
from pathlib import Path
import shlex
import subprocess
import tempfile
import time
from typing import Callable, Protocol, TextIO

LOGGER = logging.getLogger(__name__)


class _Process(Protocol):
    stdin: TextIO | None

    def poll(self) -> int | None:
        ...

    def wait(self, timeout: float | None = None) -> int:
        ...

    def terminate(self) -> None:
        ...

    def kill(self) -> None:
        ...


SpawnFn = Callable[..., _Process]


def _remove_file(path: Path) -> None:
    path.unlink(missing_ok=True)


class Transport(ABC):
    """Line-oriented command channel; every line is flushed before `send_line` returns."""

    def __init__(
        self,
        *,
        teardown_delay_s: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
        remove: Callable[[Path], None] = _remove_file,
    ) -> None:
        self._teardown_delay_s = teardown_delay_s
        self._sleep = sleep
        self._remove = remove
        self._temp_files: list[Path] = []
        self._closed = False

    @abstractmethod
    def send_line(self, text: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_alive(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _close_channel(self) -> bool:
        """Tear down the channel; return True if a consumer may still be reading."""
        raise NotImplementedError

    @property
    def temp_files(self) -> tuple[Path, ...]:
        return tuple(self._temp_files)

    def track_temp_file(self, path: str | Path) -> Path:
        p = Path(path)
        self._temp_files.append(p)
        return p

    def make_temp_file(self, suffix: str = ".dat", prefix: str = "pipeplot-") -> Path:
        fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix)
        os.close(fd)
        return self.track_temp_file(name)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        had_consumer = self._close_channel()
        if had_consumer and self._teardown_delay_s > 0 and self._temp_files:
            # The engine may still be reading data files for the last plot.
            self._sleep(self._teardown_delay_s)
        self._remove_temp_files()

    def _remove_temp_files(self) -> None:
        files, self._temp_files = self._temp_files, []
        for path in files:
            try:
                self._remove(path)
            except FileNotFoundError:
                continue
            except OSError as exc:
                LOGGER.warning("failed to remove temporary file %s: %s", path, exc)


class PipeTransport(Transport):
    """Drives an external engine process through its stdin pipe."""

    def __init__(
        self,
        proc: _Process | None,
        *,
        close_timeout_s: float | None = None,
        teardown_delay_s: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        remove: Callable[[Path], None] = _remove_file,
    ) -> None:
        super().__init__(teardown_delay_s=teardown_delay_s, sleep=sleep, remove=remove)
        self._proc = proc
        self._close_timeout_s = close_timeout_s

    @classmethod
    def connect(
        cls,
        command: str | list[str],
        keep_alive_after_exit: bool = True,
        *,
        spawn: SpawnFn = subprocess.Popen,
        close_timeout_s: float | None = None,
        teardown_delay_s: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        remove: Callable[[Path], None] = _remove_file,
    ) -> "PipeTransport":
        argv = build_command(command, keep_alive_after_exit)
        try:
            proc = spawn(
                argv,
                stdin=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                bufsize=1,
            )
        except OSError as exc:
            LOGGER.warning("failed to start %s: %s", argv[0], exc)
            proc = None
        return cls(
            proc,
            close_timeout_s=close_timeout_s,
            teardown_delay_s=teardown_delay_s,
            sleep=sleep,
            remove=remove,
        )

    def send_line(self, text: str) -> bool:
        if self._closed or self._proc is None or self._proc.stdin is None:
            return False
        stdin = self._proc.stdin
        try:
            stdin.write(text)
            stdin.write("\n")
            stdin.flush()
        except (BrokenPipeError, ValueError, OSError) as exc:
            LOGGER.warning("engine pipe write failed: %s", exc)
            return False
        LOGGER.debug("sent %d chars to engine", len(text) + 1)
        return True

    def is_alive(self) -> bool:
        return not self._closed and self._proc is not None and self._proc.poll() is None

    def _close_channel(self) -> bool:
        proc = self._proc
        self._proc = None
        if proc is None:
            return False
        if proc.stdin is not None:
            try:
                proc.stdin.close()
            except (BrokenPipeError, OSError) as exc:
                LOGGER.warning("engine pipe close failed: %s", exc)
        if self._close_timeout_s is None:
            # Like pclose: the engine finishes any queued output before exiting.
            proc.wait()
            return True
        try:
            proc.wait(timeout=self._close_timeout_s)
        except subprocess.TimeoutExpired:
            LOGGER.warning("engine did not exit within %.1fs; terminating", self._close_timeout_s)
            proc.terminate()
            try:
                proc.wait(timeout=self._close_timeout_s)
            except subprocess.TimeoutExpired:
                proc.kill()
        return True


class StreamTransport(Transport):
    """Writes commands to a text stream instead of a process (dry runs, capture)."""

    def __init__(
        self,
        stream: TextIO,
        *,
        owns_stream: bool = False,
        teardown_delay_s: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
        remove: Callable[[Path], None] = _remove_file,
    ) -> None:
        super().__init__(teardown_delay_s=teardown_delay_s, sleep=sleep, remove=remove)
        self._stream = stream
        self._owns_stream = owns_stream

    def send_line(self, text: str) -> bool:
        if self._closed:
            return False
        try:
            self._stream.write(text)
            self._stream.write("\n")
            self._stream.flush()
        except (ValueError, OSError) as exc:
            LOGGER.warning("command stream write failed: %s", exc)
            return False
        return True

    def is_alive(self) -> bool:
        return not self._closed and not self._stream.closed

    def _close_channel(self) -> bool:
        if self._owns_stream:
            self._stream.close()
        return True


def build_command(command: str | list[str], keep_alive_after_exit: bool) -> list[str]:
    argv = shlex.split(command) if isinstance(command, str) else list(command)
    if not argv:
        raise ValueError("engine command must not be empty")
    if keep_alive_after_exit and "--persist" not in argv:
        argv.append("--persist")
    return argv
