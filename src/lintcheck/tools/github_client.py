from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from lintcheck.config import get_settings
from lintcheck.contracts import RunContext


class GitHubAPIError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubClient:
    """Thin async wrapper over the check-run and pull-request file endpoints."""

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_url,
            timeout=timeout if timeout is not None else settings.http_timeout_s,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise GitHubAPIError(f"{method} {url} failed: {exc}") from exc
        if resp.status_code >= 400:
            raise GitHubAPIError(
                f"{method} {url} returned HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        return resp

    async def create_check_run(self, context: RunContext, params: Dict[str, Any]) -> int:
        resp = await self._request(
            "POST", f"/repos/{context.full_name}/check-runs", json=params
        )
        return int(resp.json()["id"])

    async def update_check_run(
        self, context: RunContext, run_id: int, params: Dict[str, Any]
    ) -> None:
        await self._request(
            "PATCH", f"/repos/{context.full_name}/check-runs/{run_id}", json=params
        )

    async def list_pull_files(
        self, context: RunContext, pull_number: int, page: int, per_page: int
    ) -> List[str]:
        resp = await self._request(
            "GET",
            f"/repos/{context.full_name}/pulls/{pull_number}/files",
            params={"page": page, "per_page": per_page},
        )
        return [f["filename"] for f in resp.json()]
