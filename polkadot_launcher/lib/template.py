from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ..errors import ExecutionFailed, TemplateError
from .command import CommandRunner

logger = logging.getLogger(__name__)

VALID_TEMPLATES = ("minimal", "parachain", "solochain")


def template_repo_url(name: str) -> str:
    return f"https://github.com/paritytech/polkadot-sdk-{name}-template.git"


def run_template(
    name: str,
    args: Sequence[str],
    *,
    runner: CommandRunner,
    templates_dir: Path,
) -> Path:
    """Clone (once) and run one of the polkadot-sdk node templates in dev mode."""

    if name not in VALID_TEMPLATES:
        raise TemplateError(f"Template unrecognized: {name}")

    dest = Path(templates_dir) / f"{name}-template"
    if not dest.exists():
        logger.info("Fetching the %s template from github", name)
        dest.parent.mkdir(parents=True, exist_ok=True)
        try:
            r = runner.run(["git", "clone", "--quiet", template_repo_url(name), str(dest)], check=False)
        except ExecutionFailed as e:
            raise TemplateError("Failed to clone template") from e
        if r.returncode != 0:
            raise TemplateError("Failed to clone template")

    serve_template(args, dest, runner=runner)
    logger.info("%s is now running.", name)
    return dest


def serve_template(args: Sequence[str], repo_path: Path, *, runner: CommandRunner) -> None:
    if not repo_path.exists():
        raise TemplateError(f"The specified template directory does not exist: {repo_path}")

    try:
        r = runner.run(
            ["cargo", "run", "--release", "--", "--dev", *args],
            check=False,
            cwd=str(repo_path),
            capture=False,
        )
    except ExecutionFailed as e:
        raise TemplateError("Failed to run a node") from e
    if r.returncode != 0:
        raise TemplateError("Failed to run a node")
