from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from lintcheck.config import get_settings
from lintcheck.contracts import Finding, RunInputs
from lintcheck.tools.files import expand_pattern, project_dir
from lintcheck.tools.linters import run_bandit, run_ruff

logger = logging.getLogger(__name__)


def _targets(inputs: RunInputs, root: Path) -> List[str]:
    # A pattern takes precedence over a project when both are given.
    if inputs.pattern:
        return [str(path) for path in expand_pattern(inputs.pattern, root)]
    target = project_dir(inputs.project, root)
    return [str(target.relative_to(root)) if target.is_relative_to(root) else str(target)]


def collect_findings(inputs: RunInputs, root: Path | None = None) -> List[Finding]:
    settings = get_settings()
    root = root or settings.workspace
    targets = _targets(inputs, root)
    if not targets:
        logger.warning("Pattern %r matched no files", inputs.pattern)
        return []

    config = str(root / inputs.config)
    if inputs.linter == "bandit":
        findings = run_bandit(targets, cwd=root, config=config)
    else:
        findings = run_ruff(targets, cwd=root, config=config, warning_rules=settings.warning_rules)
    logger.info("%s reported %d finding(s)", inputs.linter, len(findings))
    return findings
