from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .pipeline import InstallReport

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"json", "yaml", "yml"}:
        return ext
    # Default to JSON for unknown extensions.
    return "json"


def _yaml():
    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("YAML report requested but PyYAML is not available. Use a .json report path.") from e
    return yaml


def load_report(path: str) -> Dict[str, Any]:
    """Read back a report written by save_report.

    The CLI never calls this; it exists for tests and for tooling that
    inspects a saved install report.
    """

    p = Path(path)
    if not p.exists():
        return {}

    if _detect_format(p) in {"yaml", "yml"}:
        data = _yaml().safe_load(p.read_text(encoding="utf-8")) or {}
    else:
        data = json.loads(p.read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise ValueError(f"Report file must be an object/dict, got {type(data)}")

    return data


def save_report(path: str, report: InstallReport) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    data = report.to_dict()
    if _detect_format(p) in {"yaml", "yml"}:
        p.write_text(_yaml().safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")
    else:
        p.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("Install report saved to %s", p)
