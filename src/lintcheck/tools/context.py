from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping, Optional

from lintcheck.config import ConfigurationError
from lintcheck.contracts import RunContext


def _read_event(event_path: Optional[str]) -> dict:
    # Runs outside GitHub Actions have no event payload.
    if not event_path or not Path(event_path).exists():
        return {}
    return json.loads(Path(event_path).read_text(encoding="utf-8")) or {}


def load_run_context(environ: Optional[Mapping[str, str]] = None) -> RunContext:
    """Build the trigger context from the GitHub Actions environment."""
    env = os.environ if environ is None else environ

    repository = env.get("GITHUB_REPOSITORY", "")
    sha = env.get("GITHUB_SHA", "")
    if "/" not in repository:
        raise ConfigurationError("GITHUB_REPOSITORY must be set to <owner>/<repo>")
    if not sha:
        raise ConfigurationError("GITHUB_SHA must be set")
    owner, repo = repository.split("/", 1)

    event = _read_event(env.get("GITHUB_EVENT_PATH"))

    pull_request = event.get("pull_request")
    if not pull_request:
        return RunContext(owner=owner, repo=repo, sha=sha)
    return RunContext(
        owner=owner,
        repo=repo,
        sha=sha,
        pull_number=pull_request["number"],
        changed_files=pull_request.get("changed_files", 0),
    )
