from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.fetch import fetch_binary

logger = logging.getLogger(__name__)


class InstallOmniNodeStep:
    step_id = "30_install_omni_node"
    label = "$ Omni-node installation"

    def __init__(self, ctx: InstallCtx) -> None:
        self.ctx = ctx

    def run(self) -> None:
        cfg = self.ctx.cfg
        src = cfg.binary_source("omni_node")
        logger.info("Installing %s", src.name)
        fetch_binary(
            macos_url=src.macos_url,
            default_url=src.default_url,
            destination=cfg.omni_node_path,
            os_kind=self.ctx.os_kind,
            runner=self.ctx.runner,
        )
