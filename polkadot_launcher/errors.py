from __future__ import annotations

from typing import Optional


class LauncherError(RuntimeError):
    """Base class for every failure the launcher reports."""


class NotFoundError(LauncherError):
    """An expected artifact or file is absent."""


class ExternalCommandFailed(LauncherError):
    """A spawned tool exited non-zero or could not be spawned."""


class PermissionDenied(LauncherError):
    """A chmod step failed."""


class FilesystemError(LauncherError):
    """Directory creation or rename failed (carries the OS error text)."""


class TemplateError(LauncherError):
    pass


class ExecutionFailed(ExternalCommandFailed):
    def __init__(self, reason: str, *, returncode: Optional[int] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        # None when the program could not be started at all.
        self.returncode = returncode


class DownloadFailed(ExternalCommandFailed):
    def __init__(self, exit_code: Optional[int], detail: str = "") -> None:
        msg = f"Download failed with exit code: {exit_code}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.exit_code = exit_code


class PermissionFailed(PermissionDenied):
    pass


class BuilderNotExecutable(PermissionDenied):
    def __init__(self) -> None:
        super().__init__("Failed to add execute permissions to the chain-spec-builder")


class RuntimeMissing(NotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(f"WASM file not found: {path}")
        self.path = path


class NotLocated(NotFoundError):
    def __init__(self) -> None:
        super().__init__("chain_spec.json not found in the specified directories.")
