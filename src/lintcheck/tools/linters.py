from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence
import json
import logging
import subprocess

from lintcheck.contracts import Finding
from lintcheck.tools.files import relative_path

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """Raised when the static analyzer cannot produce findings."""


@dataclass
class ToolResult:
    name: str
    command: List[str]
    exit_code: int
    stdout: str
    stderr: str
    parsed: list | dict | None = None


def run_command(command: List[str], cwd: Path) -> ToolResult:
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
        return ToolResult(
            name=command[0],
            command=command,
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    except FileNotFoundError as exc:
        return ToolResult(
            name=command[0],
            command=command,
            exit_code=127,
            stdout="",
            stderr=str(exc),
        )


def _run_json_tool(command: List[str], cwd: Path) -> ToolResult:
    logger.debug("Running %s", " ".join(command))
    result = run_command(command, cwd=cwd)
    # Both tools are invoked with --exit-zero, so any other status is a tool failure.
    if result.exit_code != 0:
        detail = result.stderr.strip() or result.stdout.strip()
        raise AnalysisError(f"{result.name} exited with {result.exit_code}: {detail}")
    try:
        result.parsed = json.loads(result.stdout)
    except json.JSONDecodeError as exc:
        raise AnalysisError(f"{result.name} produced unreadable output: {exc}") from exc
    return result


def run_ruff(
    targets: Sequence[str],
    cwd: Path,
    config: str | None = None,
    warning_rules: Iterable[str] = (),
) -> List[Finding]:
    command = ["ruff", "check", "--output-format", "json", "--exit-zero"]
    if config:
        command += ["--config", config]
    command += list(targets)
    result = _run_json_tool(command, cwd)
    return parse_ruff(result.parsed or [], cwd, warning_rules)


def parse_ruff(payload: list, root: Path, warning_rules: Iterable[str] = ()) -> List[Finding]:
    prefixes = tuple(warning_rules)
    findings: List[Finding] = []
    for item in payload:
        code = item.get("code") or "syntax-error"
        start = (item.get("location") or {}).get("row") or 1
        end = (item.get("end_location") or {}).get("row") or start
        severity = "warning" if prefixes and code.startswith(prefixes) else "error"
        findings.append(
            Finding(
                file=relative_path(item.get("filename", ""), root),
                start_line=max(start, 1),
                end_line=max(end, start, 1),
                severity=severity,
                rule=code,
                message=item.get("message", ""),
            )
        )
    return findings


def run_bandit(targets: Sequence[str], cwd: Path, config: str | None = None) -> List[Finding]:
    command = ["bandit", "-f", "json", "--exit-zero", "-q"]
    if config:
        command += ["-c", config]
    command += ["-r", *targets]
    result = _run_json_tool(command, cwd)
    return parse_bandit(result.parsed or {}, cwd)


_BANDIT_SEVERITY = {"high": "error", "medium": "warning"}


def parse_bandit(payload: dict, root: Path) -> List[Finding]:
    findings: List[Finding] = []
    for item in payload.get("results", []):
        start = item.get("line_number") or 1
        line_range = item.get("line_range") or [start]
        findings.append(
            Finding(
                file=relative_path(item.get("filename", ""), root),
                start_line=max(start, 1),
                end_line=max(max(line_range), start, 1),
                severity=_BANDIT_SEVERITY.get(str(item.get("issue_severity", "")).lower(), "info"),
                rule=item.get("test_id", ""),
                message=item.get("issue_text", ""),
            )
        )
    return findings
