"""In-memory GitHub client and record builders shared by the tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set

from lintcheck.contracts import Annotation, Finding, RunContext
from lintcheck.tools.github_client import GitHubAPIError


class RecordingGitHub:
    def __init__(
        self,
        pages: Optional[Dict[int, List[str]]] = None,
        fail_updates: Optional[Set[int]] = None,
        fail_create: bool = False,
        fail_pages: Optional[Set[int]] = None,
        run_id: int = 4242,
        error_type: type = GitHubAPIError,
    ):
        self.pages = pages or {}
        self.fail_updates = fail_updates or set()
        self.fail_create = fail_create
        self.fail_pages = fail_pages or set()
        self.run_id = run_id
        self.error_type = error_type
        self.calls: List[tuple] = []
        self.pages_requested: List[int] = []

    @property
    def creates(self) -> List[Dict[str, Any]]:
        return [c[1] for c in self.calls if c[0] == "create"]

    @property
    def updates(self) -> List[Dict[str, Any]]:
        return [c[2] for c in self.calls if c[0] == "update"]

    async def create_check_run(self, context: RunContext, params: Dict[str, Any]) -> int:
        self.calls.append(("create", params))
        if self.fail_create:
            raise GitHubAPIError("create failed", status_code=500)
        return self.run_id

    async def update_check_run(
        self, context: RunContext, run_id: int, params: Dict[str, Any]
    ) -> None:
        self.calls.append(("update", run_id, params))
        attempt = len(self.updates)
        if attempt in self.fail_updates:
            raise self._error(f"update {attempt} failed", 502)

    def _error(self, message: str, status_code: int) -> BaseException:
        if self.error_type is GitHubAPIError:
            return GitHubAPIError(message, status_code=status_code)
        return self.error_type(message)

    async def list_pull_files(
        self, context: RunContext, pull_number: int, page: int, per_page: int
    ) -> List[str]:
        self.pages_requested.append(page)
        if page in self.fail_pages:
            raise GitHubAPIError(f"page {page} failed", status_code=500)
        return list(self.pages.get(page, []))


def make_annotation(index: int, level: str = "failure") -> Annotation:
    return Annotation(
        path=f"src/mod_{index}.py",
        start_line=index + 1,
        end_line=index + 1,
        annotation_level=level,
        message=f"[E{index}] problem {index}",
    )


def make_finding(file: str, severity: str = "error", line: int = 1, rule: str = "F401") -> Finding:
    return Finding(
        file=file,
        start_line=line,
        end_line=line,
        severity=severity,
        rule=rule,
        message=f"{rule} in {file}",
    )
