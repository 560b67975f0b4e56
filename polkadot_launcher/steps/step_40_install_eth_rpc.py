from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.fetch import fetch_binary

logger = logging.getLogger(__name__)


class InstallEthRpcStep:
    """RPC sidecar that runs next to the omni-node under `serve`."""

    step_id = "40_install_eth_rpc"
    label = "$ Eth-rpc installation"

    def __init__(self, ctx: InstallCtx) -> None:
        self.ctx = ctx

    def run(self) -> None:
        cfg = self.ctx.cfg
        src = cfg.binary_source("eth_rpc")
        logger.info("Installing %s", src.name)
        fetch_binary(
            macos_url=src.macos_url,
            default_url=src.default_url,
            destination=cfg.eth_rpc_path,
            os_kind=self.ctx.os_kind,
            runner=self.ctx.runner,
        )
