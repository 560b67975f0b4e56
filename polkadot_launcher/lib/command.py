from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Sequence

from ..errors import ExecutionFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def _merged_env(env: Mapping[str, str] | None) -> dict[str, str]:
    return dict(os.environ, **(env or {}))


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    capture: bool = True,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - capture=False lets the child write straight to our stdout/stderr
      (used for long-running node processes).
    - dry_run logs but does not execute.

    Raises ExecutionFailed when the program cannot be started, or when it
    exits non-zero and check=True.
    """

    argv_list = [str(a) for a in argv]
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    pipe = subprocess.PIPE if capture else None
    try:
        p = subprocess.run(
            argv_list,
            text=True,
            stdout=pipe,
            stderr=pipe,
            cwd=cwd,
            env=_merged_env(env),
        )
    except OSError as e:
        raise ExecutionFailed(f"Failed to execute {argv_list[0]}: {e}") from e

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    if check and p.returncode != 0:
        raise ExecutionFailed(
            f"Command failed ({p.returncode}): {_fmt_argv(argv_list)}\n{stderr}",
            returncode=p.returncode,
        )

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)


def run_piped(
    producer: Sequence[str],
    consumer: Sequence[str],
    *,
    check: bool = True,
    cwd: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Pipe producer stdout into consumer stdin (e.g. ``curl ... | bash``).

    The consumer inherits our stdout/stderr. The result carries the consumer's
    exit status, unless the producer failed, in which case the producer's
    status is reported.
    """

    prod = [str(a) for a in producer]
    cons = [str(a) for a in consumer]
    logger.info("CMD %s | %s", _fmt_argv(prod), _fmt_argv(cons))

    if dry_run:
        return CmdResult(argv=prod + ["|"] + cons, returncode=0, stdout="", stderr="")

    try:
        src = subprocess.Popen(prod, stdout=subprocess.PIPE, cwd=cwd)
    except OSError as e:
        raise ExecutionFailed(f"Failed to execute {prod[0]}: {e}") from e

    try:
        try:
            sink = subprocess.run(cons, stdin=src.stdout, cwd=cwd)
        except OSError as e:
            src.kill()
            raise ExecutionFailed(f"Failed to execute {cons[0]}: {e}") from e
    finally:
        if src.stdout is not None:
            src.stdout.close()
        src_rc = src.wait()

    rc = src_rc if src_rc != 0 else sink.returncode
    argv_list = prod + ["|"] + cons
    if check and rc != 0:
        raise ExecutionFailed(f"Command failed ({rc}): {_fmt_argv(argv_list)}", returncode=rc)

    return CmdResult(argv=argv_list, returncode=rc, stdout="", stderr="")


class CommandRunner(Protocol):
    """The single seam through which the launcher touches external programs."""

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        env: Mapping[str, str] | None = None,
        cwd: str | None = None,
        capture: bool = True,
    ) -> CmdResult:
        ...

    def run_piped(
        self,
        producer: Sequence[str],
        consumer: Sequence[str],
        *,
        check: bool = True,
        cwd: str | None = None,
    ) -> CmdResult:
        ...


class SubprocessRunner:
    def __init__(self, *, dry_run: bool = False) -> None:
        self.dry_run = dry_run

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        env: Mapping[str, str] | None = None,
        cwd: str | None = None,
        capture: bool = True,
    ) -> CmdResult:
        return run_cmd(argv, check=check, env=env, cwd=cwd, capture=capture, dry_run=self.dry_run)

    def run_piped(
        self,
        producer: Sequence[str],
        consumer: Sequence[str],
        *,
        check: bool = True,
        cwd: Optional[str] = None,
    ) -> CmdResult:
        return run_piped(producer, consumer, check=check, cwd=cwd, dry_run=self.dry_run)
