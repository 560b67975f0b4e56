from __future__ import annotations

from dataclasses import dataclass

from .launcher_config import LauncherConfig
from .lib.command import CommandRunner


@dataclass(frozen=True)
class InstallCtx:
    cfg: LauncherConfig
    os_kind: str
    runner: CommandRunner
