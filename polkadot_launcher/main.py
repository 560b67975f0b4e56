from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .context import InstallCtx
from .errors import TemplateError
from .launcher_config import LauncherConfig, load_launcher_config
from .lib.command import CommandRunner, SubprocessRunner
from .lib.hostos import detect_host_os
from .lib.supervisor import LaunchOutcome, build_serve_processes, serve
from .lib.template import run_template
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import InstallReport, run_pipeline
from .report_store import save_report
from .steps import (
    DownloadRuntimeStep,
    GenerateChainSpecStep,
    InstallChainSpecBuilderStep,
    InstallEthRpcStep,
    InstallOmniNodeStep,
    InstallSdkStep,
)

logger = logging.getLogger(__name__)


KNOWN_CHAINS = ("westend", "paseo", "rococo")


def build_steps(ctx: InstallCtx):
    return [
        InstallSdkStep(ctx),
        InstallChainSpecBuilderStep(ctx),
        InstallOmniNodeStep(ctx),
        InstallEthRpcStep(ctx),
        DownloadRuntimeStep(ctx),
        GenerateChainSpecStep(ctx),
    ]


def run_install(
    cfg: LauncherConfig,
    *,
    runner: CommandRunner,
    os_kind: str,
    report_path: Optional[str] = None,
) -> InstallReport:
    """Run the default provisioning pipeline and print its report."""

    ctx = InstallCtx(cfg=cfg, os_kind=os_kind, runner=runner)
    report = run_pipeline(build_steps(ctx))

    print(report.render())

    if report_path:
        save_report(report_path, report)
    return report


def run_serve(
    cfg: LauncherConfig,
    node_args: Sequence[str],
    *,
    runner: CommandRunner,
) -> List[LaunchOutcome]:
    args = list(node_args) or cfg.node_args
    processes = build_serve_processes(
        node_path=cfg.omni_node_path,
        sidecar_path=cfg.eth_rpc_path,
        node_args=args,
        sidecar_env=cfg.sidecar_env,
    )
    return serve(processes, runner=runner)


def _cmd_install(args: argparse.Namespace, cfg: LauncherConfig) -> int:
    runner = SubprocessRunner(dry_run=bool(args.dry_run))

    if args.template:
        logger.info("Called template installation")
        try:
            run_template(args.template, args.template_args, runner=runner, templates_dir=cfg.templates_dir)
        except TemplateError as e:
            logger.error("%s", e)
        return 0

    if args.chain_spec:
        logger.info("Called chain_spec generation")
        if args.chain_spec in KNOWN_CHAINS:
            logger.info("No available functionality for chain spec generation yet.")
            return 0
        logger.error("Invalid chain specification provided: %s", args.chain_spec)
        return 1

    logger.info("Installing default configuration.")
    report_path = args.report or str(cfg.report_path)
    run_install(cfg, runner=runner, os_kind=detect_host_os(), report_path=report_path)
    return 0


def _cmd_serve(args: argparse.Namespace, cfg: LauncherConfig) -> int:
    run_serve(cfg, args.node_args, runner=SubprocessRunner())
    # Subprocess outcomes are logged per process, never turned into our exit code.
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="polkadot-launcher",
        description="Install and serve a Polkadot omni-node",
        allow_abbrev=False,
    )
    p.add_argument("--config", default=None, help="Path to launcher config (yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to launcher log")
    p.add_argument("--verbose", action="store_true", help="Log at DEBUG level")

    sub = p.add_subparsers(dest="command")

    inst = sub.add_parser(
        "install",
        help="Install polkadot-sdk, fetch binaries and generate the chain spec (default)",
        epilog="With --template, any other arguments are passed to the template node.",
        allow_abbrev=False,
    )
    inst.add_argument("--template", default=None, help="Run a node template (minimal|parachain|solochain)")
    inst.add_argument("--chain-spec", default=None, help="Chain to install (westend|paseo|rococo)")
    inst.add_argument("--dry-run", action="store_true", help="Log commands without executing them")
    inst.add_argument("--report", default=None, help="Where to save the install report (json|yaml)")
    inst.set_defaults(func=_cmd_install)

    srv = sub.add_parser(
        "serve",
        help="Serve the omni-node together with the eth-rpc sidecar",
        epilog="All arguments are passed to the omni-node (default: --chain <chain-specs/chain_spec.json>).",
        allow_abbrev=False,
    )
    srv.set_defaults(func=_cmd_serve)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    p = build_parser()
    # Unknown tokens belong to the node (serve) or the template node (install --template).
    args, passthrough = p.parse_known_args(argv)

    if not getattr(args, "func", None):
        p.print_usage()
        logger.error("No valid subcommand provided. Use --help for more information.")
        return 1

    if args.command == "serve":
        args.node_args = passthrough
    elif args.command == "install" and args.template:
        args.template_args = passthrough
    elif passthrough:
        p.error(f"unrecognized arguments: {' '.join(passthrough)}")

    configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)
    cfg = load_launcher_config(args.config)
    logger.info("Working directory: %s", Path(cfg.work_dir).resolve())

    return args.func(args, cfg)
