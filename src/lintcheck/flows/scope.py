from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from lintcheck.config import get_settings
from lintcheck.contracts import Finding, RunContext

logger = logging.getLogger(__name__)


async def resolve_changed_files(
    client,
    context: RunContext,
    pull_number: int,
    declared_total: int,
    per_page: Optional[int] = None,
) -> Tuple[str, ...]:
    """Collect every changed file name of a pull request, one page at a time.

    Pages are requested in order from page 0 while ``page * per_page`` is
    below the declared file count. Entries are concatenated as returned.
    A failing page request propagates.
    """
    per_page = per_page or get_settings().files_per_page
    changed: Tuple[str, ...] = ()
    # Paging starts at 0; GitHub serves page 0 as page 1, so that page is fetched twice.
    page = 0
    while page * per_page < declared_total:
        filenames = await client.list_pull_files(
            context, pull_number, page=page, per_page=per_page
        )
        changed = changed + tuple(filenames)
        page += 1
    logger.info("Pull request #%s changes %d file(s)", pull_number, len(changed))
    logger.debug("Changed files: %s", changed)
    return changed


def filter_findings(
    findings: Sequence[Finding], changed_files: Optional[Iterable[str]] = None
) -> List[Finding]:
    if changed_files is None:
        return list(findings)
    scope = set(changed_files)
    return [f for f in findings if f.file in scope]
