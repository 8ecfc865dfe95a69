"""Resource measurement for subprocess repetitions.

One call to :func:`measure_command` runs a command to completion and
reports wall time, the CPU time that child consumed (from its
:func:`os.wait4` resource usage) and peak resident set size.  Peak RSS
comes from GNU ``time -v`` when ``/usr/bin/time`` is available, falling
back to the child's own ``ru_maxrss``.
"""

from __future__ import annotations

import logging
import os
import shlex
import signal
import subprocess
import sys
import tempfile
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Sequence

log = logging.getLogger("jauge")

GNU_TIME = Path("/usr/bin/time")

# ru_maxrss is reported in kilobytes on Linux and bytes on macOS.
_MAXRSS_PER_MB = 1024 * 1024 if sys.platform == "darwin" else 1024


# ---------------------------------------------------------------------------
# ProcessMeasurement
# ---------------------------------------------------------------------------


@dataclass
class ProcessMeasurement:
    """What one subprocess run cost."""

    wall_time_s: float
    user_time_s: float
    sys_time_s: float
    peak_rss_mb: float
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def cpu_time_s(self) -> float:
        return self.user_time_s + self.sys_time_s

    @property
    def ok(self) -> bool:
        return self.exit_code == 0 and not self.timed_out

    def metric(self, instrument_id: str) -> float:
        """Value reported for *instrument_id*.

        Raises:
            KeyError: If the instrument is not one of :data:`INSTRUMENTS`.
        """
        return getattr(self, INSTRUMENTS[instrument_id])


# Instrument id -> ProcessMeasurement attribute.
INSTRUMENTS: dict[str, str] = {
    "wall_time": "wall_time_s",
    "cpu_time": "cpu_time_s",
    "user_time": "user_time_s",
    "sys_time": "sys_time_s",
    "peak_rss": "peak_rss_mb",
}


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


def build_env(overrides: dict[str, str] | None = None) -> dict[str, str]:
    """Inherited environment with *overrides* layered on top."""
    env = dict(os.environ)
    if overrides:
        env.update(overrides)
    return env


def measure_command(
    command: str | Sequence[str],
    *,
    cwd: str | Path | None = None,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
    probe_rss: bool = True,
) -> ProcessMeasurement:
    """Run *command* once and measure it.

    CPU times and the fallback peak RSS are the resource usage of this
    child alone, as reported when it is reaped with :func:`os.wait4`, so
    commands measured concurrently from other threads do not leak into
    each other's numbers.

    Args:
        command: Shell command string or argument list.
        cwd: Working directory for the subprocess.
        env: Extra environment variables, applied over ``os.environ``.
        timeout: Seconds before the whole process group is killed.
        probe_rss: Wrap the command in GNU ``time -v`` when available.

    Returns:
        A ProcessMeasurement.  A killed run has ``timed_out`` set and
        exit code -1; it is not raised.
    """
    shell_cmd = command if isinstance(command, str) else shlex.join(command)

    report: str | None = None
    if probe_rss and GNU_TIME.exists():
        fd, report = tempfile.mkstemp(prefix="jauge-rss-", suffix=".txt")
        os.close(fd)
        shell_cmd = f"{GNU_TIME} -v -o {shlex.quote(report)} sh -c {shlex.quote(shell_cmd)}"

    start = time.perf_counter()

    proc = subprocess.Popen(
        shell_cmd,
        shell=True,
        cwd=str(cwd) if cwd else None,
        env=build_env(env),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        start_new_session=True,
    )
    stdout = _Drain(proc.stdout)
    stderr = _Drain(proc.stderr)

    expired = threading.Event()
    reaped = threading.Event()
    lock = threading.Lock()

    def on_timeout() -> None:
        with lock:
            if reaped.is_set():
                return
            expired.set()
            _kill_group(proc)

    timer = threading.Timer(timeout, on_timeout) if timeout is not None else None
    if timer is not None:
        timer.daemon = True
        timer.start()
    try:
        _, status, usage = os.wait4(proc.pid, 0)
        wall = time.perf_counter() - start
        with lock:
            reaped.set()
    finally:
        if timer is not None:
            timer.cancel()
    proc.returncode = os.waitstatus_to_exitcode(status)

    timed_out = expired.is_set()
    exit_code = -1 if timed_out else proc.returncode

    rss_mb = 0.0
    if report is not None:
        rss_mb = _read_report(report)
    if rss_mb <= 0:
        rss_mb = usage.ru_maxrss / _MAXRSS_PER_MB

    return ProcessMeasurement(
        wall_time_s=wall,
        user_time_s=usage.ru_utime,
        sys_time_s=usage.ru_stime,
        peak_rss_mb=rss_mb,
        exit_code=exit_code,
        stdout=stdout.result(),
        stderr=stderr.result(),
        timed_out=timed_out,
    )


class _Drain:
    """Reads a child's pipe to EOF on a background thread."""

    # A grandchild outside the killed process group can hold the pipe open.
    JOIN_TIMEOUT = 5.0

    def __init__(self, stream: IO[str] | None) -> None:
        self._stream = stream
        self._chunks: list[str] = []
        self._thread = threading.Thread(target=self._read, daemon=True)
        self._thread.start()

    def _read(self) -> None:
        stream = self._stream
        if stream is None:
            return
        try:
            for chunk in iter(lambda: stream.read(4096), ""):
                self._chunks.append(chunk)
        except (OSError, ValueError) as exc:
            log.debug("Stopped reading child output: %s", exc)

    def result(self) -> str:
        self._thread.join(self.JOIN_TIMEOUT)
        if self._thread.is_alive():
            log.debug(
                "Child output still open after %.0fs; keeping what was read",
                self.JOIN_TIMEOUT,
            )
        elif self._stream is not None:
            self._stream.close()
        return "".join(self._chunks)


def _kill_group(proc: subprocess.Popen[str]) -> None:
    """SIGKILL the session started for *proc*.

    Never reaps the child (no ``proc.kill()``, which polls): it is left
    for the :func:`os.wait4` call in :func:`measure_command`.
    """
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except OSError as exc:
        log.debug("Could not kill process group of %d: %s", proc.pid, exc)


def _read_report(path: str) -> float:
    try:
        return parse_max_rss(Path(path).read_text())
    except OSError as exc:
        log.debug("No GNU time report at %s: %s", path, exc)
        return 0.0
    finally:
        Path(path).unlink(missing_ok=True)


def parse_max_rss(report: str) -> float:
    """Peak RSS in MB from GNU ``time -v`` output, or 0.0 if absent.

    The relevant line reads::

        Maximum resident set size (kbytes): 123456
    """
    for line in report.splitlines():
        label, _, value = line.rpartition(":")
        if "Maximum resident set size" in label:
            try:
                return int(value.strip()) / 1024
            except ValueError:
                return 0.0
    return 0.0
