from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from lintcheck.config import get_settings
from lintcheck.contracts import Finding, RunContext, RunInputs, Verdict
from lintcheck.flows.annotations import build_verdict, chunk_annotations, to_annotations
from lintcheck.flows.check_run import CheckRunDriver
from lintcheck.flows.report import render_check_text
from lintcheck.flows.scan import collect_findings
from lintcheck.flows.scope import filter_findings, resolve_changed_files
from lintcheck.tools.rulesets import load_ruleset

logger = logging.getLogger(__name__)


async def publish_report(
    findings: Sequence[Finding],
    text: str,
    context: RunContext,
    client,
) -> Verdict:
    settings = get_settings()
    changed_files = None
    if context.pull_number is not None:
        changed_files = await resolve_changed_files(
            client, context, context.pull_number, context.changed_files or 0,
            per_page=settings.files_per_page,
        )

    relevant = filter_findings(findings, changed_files)
    logger.info("%d of %d finding(s) are in scope", len(relevant), len(findings))

    annotations = to_annotations(relevant)
    verdict = build_verdict(annotations)
    batches = chunk_annotations(annotations, settings.batch_size)

    driver = CheckRunDriver(client, context, name=settings.check_name)
    await driver.publish(batches, verdict, text)
    return verdict


async def run_pipeline(
    inputs: RunInputs,
    context: RunContext,
    client,
    root: Path | None = None,
) -> Verdict:
    root = root or get_settings().workspace
    ruleset = load_ruleset(root / inputs.config, inputs.linter)
    text = render_check_text(inputs, ruleset)
    findings = collect_findings(inputs, root=root)
    return await publish_report(findings, text, context, client)
