from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..errors import DownloadFailed, ExecutionFailed, FilesystemError, PermissionFailed
from .command import CommandRunner
from .hostos import MACOS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchSpec:
    source_url: str
    destination: Path
    executable: bool = False


def select_url(os_kind: str, *, macos_url: str, default_url: str) -> str:
    return macos_url if os_kind == MACOS else default_url


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Failed to create directory {path}: {e}") from e


def _discard_partial(dest: Path) -> None:
    # wget -O creates the target before the transfer, so a failed run leaves a stub.
    try:
        dest.unlink(missing_ok=True)
    except OSError as e:
        raise FilesystemError(f"Failed to remove partial download {dest}: {e}") from e


def ensure_artifact(spec: FetchSpec, *, runner: CommandRunner) -> bool:
    """Make sure ``spec.destination`` is present (and executable if asked).

    Idempotent: an existing destination short-circuits before any command
    runs, so permissions are not reset either. Returns True when a download
    actually happened.
    """

    dest = Path(spec.destination)
    if dest.exists():
        logger.info("%s is already available", dest)
        return False

    ensure_dir(dest.parent)

    logger.info("Downloading %s -> %s", spec.source_url, dest)
    try:
        r = runner.run(["wget", "-O", str(dest), spec.source_url], check=False)
    except ExecutionFailed as e:
        _discard_partial(dest)
        raise DownloadFailed(None, e.reason) from e
    if r.returncode != 0:
        _discard_partial(dest)
        raise DownloadFailed(r.returncode)

    logger.info("Download successful: %s", dest)

    if spec.executable:
        try:
            r = runner.run(["chmod", "755", str(dest)], check=False)
        except ExecutionFailed as e:
            raise PermissionFailed(f"Failed to set permissions on {dest}: {e.reason}") from e
        if r.returncode != 0:
            raise PermissionFailed(f"Failed to set permissions on {dest} (exit {r.returncode})")
        logger.info("Set executable permissions for: %s", dest)

    return True


def fetch_binary(
    *,
    macos_url: str,
    default_url: str,
    destination: Path,
    os_kind: str,
    runner: CommandRunner,
) -> bool:
    url = select_url(os_kind, macos_url=macos_url, default_url=default_url)
    return ensure_artifact(FetchSpec(source_url=url, destination=destination, executable=True), runner=runner)
