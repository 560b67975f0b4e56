from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

RULE = "=" * 75


class InstallStep(Protocol):
    """A single labelled, independently evaluated provisioning step."""

    step_id: str
    label: str

    def run(self) -> None:
        ...


@dataclass(frozen=True)
class StepOutcome:
    step_id: str
    label: str
    ok: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"step_id": self.step_id, "label": self.label, "ok": self.ok, "error": self.error}


@dataclass
class InstallReport:
    outcomes: List[StepOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failed(self) -> List[StepOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def render(self) -> str:
        lines = [" ", RULE, " "]
        for o in self.outcomes:
            lines.append(f"{o.label} success ✓" if o.ok else f"{o.label} failed ✗")
        lines += [" ", RULE, " "]
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": self.ok, "steps": [o.to_dict() for o in self.outcomes]}


def run_pipeline(steps: Sequence[InstallStep]) -> InstallReport:
    """Run every step in order; a failing step never stops the ones after it."""

    report = InstallReport()

    for step in steps:
        logger.info("Running step %s", step.step_id)
        try:
            step.run()
        except Exception as e:
            logger.error("Step %s failed: %s", step.step_id, e)
            logger.debug("Step %s traceback", step.step_id, exc_info=True)
            report.outcomes.append(StepOutcome(step_id=step.step_id, label=step.label, ok=False, error=str(e)))
        else:
            report.outcomes.append(StepOutcome(step_id=step.step_id, label=step.label, ok=True))

    logger.info("Pipeline finished: %d/%d steps succeeded", len(report.outcomes) - len(report.failed), len(report.outcomes))
    return report
