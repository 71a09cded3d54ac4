from __future__ import annotations

from typing import Any, Dict, Optional

from lintcheck.contracts import RunInputs
from lintcheck.tools.jsonio import pretty_json


_LINTER_TITLES = {"ruff": "Ruff", "bandit": "Bandit"}


def _value(value: Optional[str]) -> str:
    return f"`{value or '(not provided)'}`"


def render_check_text(inputs: RunInputs, ruleset: Dict[str, Any]) -> str:
    lines = [
        "## Configuration",
        "",
        "#### Actions Input",
        "",
        "| Name | Value |",
        "| ---- | ----- |",
        f"| config | {_value(inputs.config)} |",
        f"| project | {_value(inputs.project)} |",
        f"| pattern | {_value(inputs.pattern)} |",
        f"| linter | {_value(inputs.linter)} |",
        "",
        f"#### {_LINTER_TITLES.get(inputs.linter, inputs.linter)} Configuration",
        "",
        "```json",
        pretty_json(ruleset),
        "```",
    ]
    return "\n".join(lines)


def render_failure_text(text: str, error: BaseException) -> str:
    return "\n".join([text, "", "## Reporting Error", "", f"`{type(error).__name__}: {error}`"])
