"""HTTP client for the ORCID public API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pubsync.adapters.http_resilience import ResilientClient

from .schema import OrcidBulkResponse, OrcidWorksResponse

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from pubsync.adapters.http_resilience import ClientFactory
    from pubsync.config.orcid import OrcidConfig

log = getLogger(__name__)


class OrcidAPIError(RuntimeError):
    """Raised when the ORCID API returns an unexpected response."""


def should_cache_payload(payload: object) -> bool:
    """Bulk responses that carry per-work errors are never cached."""

    if not isinstance(payload, dict):
        return False
    bulk = payload.get("bulk")
    if not isinstance(bulk, list):
        return True
    return not any(isinstance(entry, dict) and "error" in entry for entry in bulk)


class OrcidClient:
    """Async client for one ORCID record; use as ``async with OrcidClient(...) as orcid``."""

    def __init__(
        self,
        *,
        config: OrcidConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient
        self._http: ResilientClient | None = None

    async def __aenter__(self) -> OrcidClient:
        self._http = self._client_factory(self._config.resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def fetch_work_summaries(self) -> OrcidWorksResponse:
        payload = await self._get_json(f"{self._config.orcid_id}/works")
        return OrcidWorksResponse.model_validate(payload)

    async def fetch_works(self, put_codes: Sequence[int]) -> OrcidBulkResponse:
        if not put_codes:
            return OrcidBulkResponse()
        if len(put_codes) > self._config.batch_size:
            raise ValueError(
                f"Requested {len(put_codes)} works in one call; "
                f"the limit is {self._config.batch_size}"
            )
        codes = ",".join(str(code) for code in put_codes)
        payload = await self._get_json(f"{self._config.orcid_id}/works/{codes}")
        return OrcidBulkResponse.model_validate(payload)

    async def _get_json(self, path: str) -> dict[str, object]:
        if self._http is None:
            raise OrcidAPIError("OrcidClient must be used as an async context manager")
        response = await self._http.get(path)
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise OrcidAPIError(f"Unexpected ORCID response payload for {path}")
        return payload
