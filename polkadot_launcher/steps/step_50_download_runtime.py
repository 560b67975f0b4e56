from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.fetch import FetchSpec, ensure_artifact

logger = logging.getLogger(__name__)


class DownloadRuntimeStep:
    step_id = "50_download_runtime"
    label = "$ Wasm file download script"

    def __init__(self, ctx: InstallCtx) -> None:
        self.ctx = ctx

    def run(self) -> None:
        cfg = self.ctx.cfg
        spec = FetchSpec(
            source_url=cfg.runtime_wasm_url,
            destination=cfg.runtime_wasm_path,
            executable=False,
        )
        ensure_artifact(spec, runner=self.ctx.runner)
