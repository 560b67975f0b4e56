from __future__ import annotations

import logging

from ..context import InstallCtx

logger = logging.getLogger(__name__)


class InstallSdkStep:
    step_id = "10_install_sdk"
    label = "$ Polkadot installation"

    def __init__(self, ctx: InstallCtx) -> None:
        self.ctx = ctx

    def run(self) -> None:
        url = self.ctx.cfg.sdk_script_url
        logger.info("Installing Polkadot via curl (%s)", url)

        # Remote getting-started script, executed by bash straight from the pipe.
        self.ctx.runner.run_piped(
            ["curl", "--proto", "=https", "--tlsv1.2", "-sSf", url],
            ["bash"],
        )
        logger.info("Polkadot-sdk is now installed.")
