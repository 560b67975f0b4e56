from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence

import pytest

from polkadot_launcher.lib.command import CmdResult

Handler = Callable[[List[str], dict], Optional[int]]


class FakeRunner:
    """Records every call and answers from a scripted handler.

    The handler gets (argv, kwargs) and returns an exit code, or None for 0.
    It may raise ExecutionFailed to simulate a program that cannot start.
    """

    def __init__(self, handler: Optional[Handler] = None) -> None:
        self.handler = handler
        self.calls: List[List[str]] = []
        self.kwargs: List[dict] = []

    def _answer(self, argv: List[str], kwargs: dict) -> CmdResult:
        self.calls.append(argv)
        self.kwargs.append(kwargs)
        rc = self.handler(argv, kwargs) if self.handler else None
        return CmdResult(argv=argv, returncode=rc or 0, stdout="", stderr="")

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        env: Mapping[str, str] | None = None,
        cwd: str | None = None,
        capture: bool = True,
    ) -> CmdResult:
        return self._answer([str(a) for a in argv], {"check": check, "env": env, "cwd": cwd, "capture": capture})

    def run_piped(
        self,
        producer: Sequence[str],
        consumer: Sequence[str],
        *,
        check: bool = True,
        cwd: str | None = None,
    ) -> CmdResult:
        argv = [str(a) for a in producer] + ["|"] + [str(a) for a in consumer]
        return self._answer(argv, {"check": check, "cwd": cwd})

    def programs(self) -> List[str]:
        return [c[0] for c in self.calls]


def wget_writes_file(argv: List[str], kwargs: dict) -> Optional[int]:
    """Handler: behave like a successful wget (write the -O target)."""

    if argv[0] == "wget":
        Path(argv[2]).write_text("downloaded", encoding="utf-8")
    return 0


@pytest.fixture
def fake_runner():
    return FakeRunner()
