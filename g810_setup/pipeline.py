from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from .errors import ProvisioningError
from .lib.command import CommandExecutor
from .result import Severity, StepResult
from .run_config import RunConfig

logger = logging.getLogger(__name__)


class ProvisioningState(str, Enum):
    START = "start"
    DETECTED = "detected"
    VALIDATED = "validated"
    DEPS_VERIFIED = "deps_verified"
    ACCESS_VERIFIED = "access_verified"
    INSTALLED = "installed"
    CONFIGURED = "configured"
    SERVICE_ENABLED = "service_enabled"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class RunContext:
    """What every step gets: the fixed run configuration plus collaborators."""

    config: RunConfig
    executor: CommandExecutor
    confirm: Callable[[str], bool]

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run


class Step(Protocol):
    """A single idempotent step.

    ``reaches`` is the state the workflow is in once the step succeeds (None
    if the step doesn't move it). Best-effort steps can only warn.
    """

    step_id: str
    reaches: Optional[ProvisioningState]
    best_effort: bool

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        ...


@dataclass
class PipelineResult:
    state: Dict[str, Any]
    status: ProvisioningState = ProvisioningState.START
    ran_steps: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def run_pipeline(ctx: RunContext, steps: Sequence[Step], *, state: Optional[Dict[str, Any]] = None) -> PipelineResult:
    """Run steps in order.

    Any fatal outcome of a mandatory step moves the workflow to FAILED and
    raises ProvisioningError. Warnings are logged, collected and never gate
    success.
    """

    result = PipelineResult(state=state if state is not None else {})
    result.state["warnings"] = result.warnings

    for step in steps:
        result.state["current_step"] = step.step_id
        logger.debug("Running step %s", step.step_id)

        try:
            outcome = step.run(ctx, result.state)
        except ProvisioningError as e:
            outcome = StepResult.failure(str(e))

        result.ran_steps.append(step.step_id)

        if outcome.fatal and step.best_effort:
            outcome = StepResult.warning(outcome.message)

        if outcome.fatal:
            result.status = ProvisioningState.FAILED
            result.state["status"] = result.status.value
            raise ProvisioningError(outcome.message)

        if outcome.severity is Severity.WARNING:
            logger.warning("%s", outcome.message)
            result.warnings.append(outcome.message)
        elif outcome.message:
            logger.info("%s", outcome.message)

        if step.reaches is not None:
            result.status = step.reaches
            result.state["status"] = result.status.value

    result.state["current_step"] = None
    result.status = ProvisioningState.DONE
    result.state["status"] = result.status.value
    return result
