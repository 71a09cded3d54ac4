from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lintcheck.config import ConfigurationError


AnnotationLevel = Literal["notice", "warning", "failure"]
Conclusion = Literal["success", "failure"]


class Finding(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str
    start_line: int = Field(ge=1)
    end_line: int = Field(ge=1)
    # "warning" or "error"; analyzers may report other levels (e.g. "info").
    severity: str
    rule: str
    message: str


class Annotation(BaseModel):
    """A finding in the shape of a GitHub check-run annotation."""

    model_config = ConfigDict(frozen=True)

    path: str
    start_line: int
    end_line: int
    annotation_level: AnnotationLevel
    message: str


Batch = List[Annotation]


class Verdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    error_count: int
    warning_count: int
    conclusion: Conclusion
    summary: str


class CheckRunOutput(BaseModel):
    title: str
    summary: str
    text: str
    annotations: List[Annotation] = Field(default_factory=list)


class RunContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    sha: str
    pull_number: Optional[int] = None
    changed_files: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class RunInputs(BaseModel):
    config: str = "pyproject.toml"
    project: Optional[str] = None
    pattern: Optional[str] = None
    linter: Literal["ruff", "bandit"] = "ruff"

    @model_validator(mode="after")
    def _require_target(self) -> "RunInputs":
        if not self.project and not self.pattern:
            raise ConfigurationError("Please set project or pattern input")
        return self
