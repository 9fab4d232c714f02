"""Run the seed steps in order, halting on the first failure."""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

from medusa_seed.errors import SeedStepError
from medusa_seed.middleware.access_log import SEED_STEP_CTX
from medusa_seed.steps import SEED_STEPS, SeedContext, SeedOptions, Step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    name: str
    duration_ms: float
    result: Any


@dataclass
class SeedReport:
    context: SeedContext
    steps: list[StepResult] = field(default_factory=list)

    @property
    def completed(self) -> list[str]:
        return [step.name for step in self.steps]


async def run_steps(ctx: SeedContext, steps: Sequence[Step] = SEED_STEPS) -> SeedReport:
    """Execute *steps* strictly in order against *ctx*.

    The first exception raised by a step is re-raised as :class:`SeedStepError`
    (original exception chained) and no later step runs.  Records created by
    earlier steps are left in place.
    """
    report = SeedReport(context=ctx)
    total = len(steps)
    for index, step in enumerate(steps, start=1):
        logger.info("[%d/%d] %s", index, total, step.name)
        token = SEED_STEP_CTX.set(step.name)
        start = time.perf_counter()
        try:
            result = await step.run(ctx)
        except Exception as exc:
            raise SeedStepError(step.name, exc) from exc
        finally:
            SEED_STEP_CTX.reset(token)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        report.steps.append(StepResult(name=step.name, duration_ms=duration_ms, result=result))
    return report


async def run_seed(
    client: httpx.AsyncClient,
    options: SeedOptions | None = None,
    steps: Sequence[Step] = SEED_STEPS,
) -> SeedReport:
    """Seed the backend behind the authenticated admin *client*."""
    ctx = SeedContext(client=client, options=options or SeedOptions())
    return await run_steps(ctx, steps)
