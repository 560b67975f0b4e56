from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..errors import ExecutionFailed
from .command import CommandRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManagedProcess:
    name: str
    executable: Path
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> List[str]:
        return [str(self.executable), *self.args]


@dataclass(frozen=True)
class LaunchOutcome:
    name: str
    ok: bool
    returncode: Optional[int] = None
    error: Optional[str] = None


def launch(proc: ManagedProcess, *, runner: CommandRunner) -> LaunchOutcome:
    """Run one process to completion and report on its own logger."""

    plog = logging.getLogger(f"{__name__}.{proc.name}")
    plog.info("Running %s...", proc.name)
    plog.info("args: %s", proc.args)

    try:
        r = runner.run(proc.argv, check=False, env=proc.env or None, capture=False)
    except ExecutionFailed as e:
        plog.error("Failed to run %s: %s", proc.name, e.reason)
        return LaunchOutcome(name=proc.name, ok=False, error=e.reason)
    except Exception as e:  # isolated per process
        plog.exception("Failed to run %s", proc.name)
        return LaunchOutcome(name=proc.name, ok=False, error=str(e))

    if r.returncode == 0:
        plog.info("%s is now running.", proc.name)
        return LaunchOutcome(name=proc.name, ok=True, returncode=0)

    plog.error("%s failed to start with exit status: %s", proc.name, r.returncode)
    return LaunchOutcome(
        name=proc.name,
        ok=False,
        returncode=r.returncode,
        error=f"exit status {r.returncode}",
    )


def serve(processes: Sequence[ManagedProcess], *, runner: CommandRunner) -> List[LaunchOutcome]:
    """Launch every process on its own thread and wait for all of them.

    No process failure stops or signals another one. Outcomes come back in
    input order; each thread only ever writes its own slot.
    """

    outcomes: List[Optional[LaunchOutcome]] = [None] * len(processes)

    def _worker(idx: int, proc: ManagedProcess) -> None:
        outcomes[idx] = launch(proc, runner=runner)

    threads = [
        threading.Thread(target=_worker, args=(i, p), name=f"serve-{p.name}", daemon=False)
        for i, p in enumerate(processes)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    done = [o for o in outcomes if o is not None]
    logger.info("All launched processes have exited (%d)", len(done))
    return done


def build_serve_processes(
    *,
    node_path: Path,
    sidecar_path: Path,
    node_args: Sequence[str],
    sidecar_env: Dict[str, str],
) -> List[ManagedProcess]:
    return [
        ManagedProcess(name="omni-node", executable=node_path, args=list(node_args)),
        ManagedProcess(name="eth-rpc", executable=sidecar_path, env=dict(sidecar_env)),
    ]
