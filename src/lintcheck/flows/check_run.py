"""Check-run lifecycle: create, ordered batch updates, terminal finalization.

The driver owns one remote check run for the lifetime of a run. Calls are
awaited one at a time, so the remote resource never sees two writers.

    not_created --create--> in_progress --last batch--> completed
         |                       |
         |                       +--update fails--> completed (failure)
         +--no batches--> completed
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Any, Dict, List, Optional, Sequence

from lintcheck.config import get_settings
from lintcheck.contracts import Annotation, Batch, CheckRunOutput, RunContext, Verdict
from lintcheck.flows.report import render_failure_text

logger = logging.getLogger(__name__)


class CheckRunStatus(str, Enum):
    NOT_CREATED = "not_created"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class CheckRunStateError(Exception):
    """Raised on a transition the check-run lifecycle does not allow."""


class CheckRunDriver:
    def __init__(self, client, context: RunContext, name: Optional[str] = None):
        self.client = client
        self.context = context
        self.name = name or get_settings().check_name
        self.run_id: Optional[int] = None
        self.status = CheckRunStatus.NOT_CREATED

    async def publish(self, batches: Sequence[Batch], verdict: Verdict, text: str) -> int:
        """Drive the check run to ``completed`` and return its id.

        Without batches the create call itself carries the verdict. Otherwise
        the run is created ``in_progress`` and each batch is sent in order;
        the call carrying the last batch completes the run. If an update
        fails, the run is completed as a failure with no annotations and the
        original error is raised again. An error from that final call
        propagates as is.
        """
        if self.status is not CheckRunStatus.NOT_CREATED:
            raise CheckRunStateError(f"Check run {self.run_id} was already published")

        if not batches:
            await self._create(
                status=CheckRunStatus.COMPLETED,
                conclusion=verdict.conclusion,
                output=self._output(verdict.summary, text, []),
            )
            return self.run_id

        await self._create(status=CheckRunStatus.IN_PROGRESS)
        try:
            for index, batch in enumerate(batches, start=1):
                final = index == len(batches)
                await self._update(
                    status=CheckRunStatus.COMPLETED if final else CheckRunStatus.IN_PROGRESS,
                    conclusion=verdict.conclusion if final else None,
                    output=self._output(verdict.summary, text, batch),
                )
                logger.debug("Sent batch %d/%d (%d annotations)", index, len(batches), len(batch))
        except BaseException as exc:
            logger.error("Updating check run %s failed: %s", self.run_id, exc)
            await self._update(
                status=CheckRunStatus.COMPLETED,
                conclusion="failure",
                output=self._output(verdict.summary, render_failure_text(text, exc), []),
            )
            raise
        return self.run_id

    def _output(self, summary: str, text: str, annotations: List[Annotation]) -> Dict[str, Any]:
        output = CheckRunOutput(title=self.name, summary=summary, text=text, annotations=annotations)
        return output.model_dump()

    def _params(
        self,
        status: CheckRunStatus,
        conclusion: Optional[str],
        output: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"name": self.name, "status": status.value}
        if conclusion is not None:
            params["conclusion"] = conclusion
        if output is not None:
            params["output"] = output
        return params

    async def _create(
        self,
        status: CheckRunStatus,
        conclusion: Optional[str] = None,
        output: Optional[Dict[str, Any]] = None,
    ) -> None:
        params = self._params(status, conclusion, output)
        params["head_sha"] = self.context.sha
        self.run_id = await self.client.create_check_run(self.context, params)
        self.status = status
        logger.info("Created check run %s (%s)", self.run_id, status.value)

    async def _update(
        self,
        status: CheckRunStatus,
        conclusion: Optional[str] = None,
        output: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self.status is not CheckRunStatus.IN_PROGRESS:
            raise CheckRunStateError(
                f"Cannot update check run {self.run_id} in state {self.status.value}"
            )
        await self.client.update_check_run(
            self.context, self.run_id, self._params(status, conclusion, output)
        )
        self.status = status
        if status is CheckRunStatus.COMPLETED:
            logger.info("Completed check run %s (%s)", self.run_id, conclusion)
