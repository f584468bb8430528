"""Bounded subprocess capture."""

from __future__ import annotations

import subprocess
import threading
from collections.abc import Sequence
from contextlib import ExitStack
from dataclasses import dataclass
from typing import IO

from loguru import logger

from localhelp.errors import OutputLimitExceededError

MAX_OUTPUT_BYTES = 1024 * 1024
_CHUNK_BYTES = 64 * 1024


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and decoded output of one finished child process."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class _StderrDrain:
    """Read a child's stderr on a worker thread, killing the children once it passes the limit."""

    def __init__(
        self,
        stream: IO[bytes] | None,
        limit: int,
        victims: Sequence[subprocess.Popen[bytes]],
    ) -> None:
        self._stream = stream
        self._limit = limit
        self._victims = tuple(victims)
        self._data = bytearray()
        self.exceeded = False
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        if self._stream is None:
            return
        while chunk := self._stream.read1(_CHUNK_BYTES):  # type: ignore[attr-defined]
            if len(self._data) + len(chunk) > self._limit:
                self.exceeded = True
                for process in self._victims:
                    process.kill()
                return
            self._data.extend(chunk)

    def collect(self) -> str:
        self._thread.join()
        return self._data.decode("utf-8", errors="replace")


def run_captured(argv: Sequence[str], *, max_output_bytes: int = MAX_OUTPUT_BYTES) -> ProcessResult:
    """Run `argv` without a shell and capture its output.

    Raises `OSError` when the program cannot be spawned and
    `OutputLimitExceededError` when stdout or stderr grows past `max_output_bytes`.
    """

    command = tuple(argv)
    logger.debug("process.spawn argv={}", command)
    with subprocess.Popen(  # noqa: S603
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    ) as process:
        drain = _StderrDrain(process.stderr, max_output_bytes, (process,))
        try:
            stdout = _read_bounded(process, command, max_output_bytes)
            returncode = process.wait()
        finally:
            stderr = drain.collect()

    if drain.exceeded:
        raise OutputLimitExceededError(command, max_output_bytes)
    return ProcessResult(argv=command, returncode=returncode, stdout=stdout, stderr=stderr)


def run_pipeline(
    first: Sequence[str],
    second: Sequence[str],
    *,
    max_output_bytes: int = MAX_OUTPUT_BYTES,
) -> ProcessResult:
    """Run `first | second` without a shell.

    The reported exit status is the rightmost non-zero one, so a failing
    producer is not hidden by a succeeding filter. Each stage's stderr is
    bounded separately.
    """

    upstream_argv = tuple(first)
    downstream_argv = tuple(second)
    pipeline_argv = (*upstream_argv, "|", *downstream_argv)
    logger.debug("process.pipeline argv={} | {}", upstream_argv, downstream_argv)
    with ExitStack() as stack:
        upstream = stack.enter_context(
            subprocess.Popen(  # noqa: S603
                upstream_argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        )
        downstream = stack.enter_context(
            subprocess.Popen(  # noqa: S603
                downstream_argv,
                stdin=upstream.stdout,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        )
        # The filter holds the only read end from here on.
        if upstream.stdout is not None:
            upstream.stdout.close()
        stages = (upstream, downstream)
        drains = [_StderrDrain(stage.stderr, max_output_bytes, stages) for stage in stages]
        try:
            try:
                stdout = _read_bounded(downstream, downstream_argv, max_output_bytes)
            except OutputLimitExceededError:
                upstream.kill()
                raise
            downstream_code = downstream.wait()
            upstream_code = upstream.wait()
        finally:
            stderr = "".join(drain.collect() for drain in drains)

    if any(drain.exceeded for drain in drains):
        raise OutputLimitExceededError(pipeline_argv, max_output_bytes)
    returncode = downstream_code if downstream_code != 0 else upstream_code
    return ProcessResult(argv=pipeline_argv, returncode=returncode, stdout=stdout, stderr=stderr)


def _read_bounded(process: subprocess.Popen[bytes], argv: tuple[str, ...], limit: int) -> str:
    if process.stdout is None:
        return ""
    data = process.stdout.read(limit + 1)
    if len(data) > limit:
        process.kill()
        raise OutputLimitExceededError(argv, limit)
    return data.decode("utf-8", errors="replace")
