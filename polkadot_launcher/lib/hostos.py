from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

MACOS = "macos"
LINUX = "linux"
WINDOWS = "windows"
WINDOWS_WSL2 = "windows-wsl2"


def _read_text(path: Path) -> Optional[str]:
    try:
        txt = path.read_text(encoding="utf-8", errors="ignore").strip()
        return txt or None
    except OSError:
        return None


def is_wsl(proc_version_path: str = "/proc/version") -> bool:
    txt = _read_text(Path(proc_version_path)) or ""
    return "Microsoft" in txt


def detect_host_os(system: Optional[str] = None, *, proc_version_path: str = "/proc/version") -> str:
    """Classify the host once at startup.

    Returns one of macos | linux | windows | windows-wsl2, or
    "Unknown operating system: <name>" for anything else.
    """

    name = (system if system is not None else platform.system()).strip()
    key = name.lower()

    if key in {"darwin", "macos"}:
        result = MACOS
    elif key == "linux":
        result = LINUX
    elif key == "windows":
        result = WINDOWS_WSL2 if is_wsl(proc_version_path) else WINDOWS
    else:
        result = f"Unknown operating system: {name}"

    logger.info("Host OS classified as %s", result)
    return result
