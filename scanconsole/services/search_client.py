# scanconsole/services/search_client.py
import httpx
from pydantic import ValidationError
from typing import Any, Dict, List, Optional

from scanconsole.core.config import settings
from scanconsole.core.constants import ScanType
from scanconsole.core.exceptions import SearchServiceError
from scanconsole.core.logging import logger
from scanconsole.schemas.scan import ScanInfo, SearchScanRequest

# Status codes whose body carries a structured ``{"message": ...}``
STRUCTURED_ERROR_STATUSES = (400, 409)


def create_http_client() -> httpx.AsyncClient:
    """Shared client for the search / scan results service"""
    headers = {"Accept": "application/json"}
    if settings.SEARCH_API_TOKEN:
        headers["Authorization"] = f"Bearer {settings.SEARCH_API_TOKEN}"

    return httpx.AsyncClient(
        base_url=settings.SEARCH_API_URL,
        headers=headers,
        timeout=settings.SEARCH_API_TIMEOUT_SECONDS,
    )


def _error_message(response: httpx.Response) -> Optional[str]:
    if response.status_code not in STRUCTURED_ERROR_STATUSES:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("message")
    return None


def _undecodable(operation: str, error: Exception) -> SearchServiceError:
    logger.error(f"Search service returned an unreadable {operation} response: {error}")
    return SearchServiceError("", status_code=502)


class SearchClient:
    """Client for the external scan search and scan results endpoints"""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _request(self, method: str, path: str, json: Dict[str, Any] = None) -> httpx.Response:
        try:
            response = await self.http.request(method, path, json=json)
        except httpx.TransportError as e:
            logger.error(f"Search service unreachable: {method} {path}: {e}")
            raise SearchServiceError("", status_code=503) from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.warning(
                f"Search service rejected {method} {path}",
                extra={"status_code": response.status_code, "error_message": message},
            )
            raise SearchServiceError(message or "", status_code=response.status_code)

        return response

    async def search_scans(self, scan_type: ScanType, request: SearchScanRequest) -> List[ScanInfo]:
        response = await self._request(
            "POST",
            f"/deepfence/search/{scan_type.slug}/scans",
            json=request.model_dump(),
        )
        if not response.content:
            return []
        try:
            rows = response.json()
            if rows is None:
                return []
            return [ScanInfo(**row) for row in rows]
        except (ValueError, TypeError, ValidationError) as e:
            raise _undecodable("search", e)

    async def count_scans(self, scan_type: ScanType, request: SearchScanRequest) -> int:
        response = await self._request(
            "POST",
            f"/deepfence/search/count/{scan_type.slug}/scans",
            json=request.model_dump(),
        )
        try:
            return int(response.json().get("count", 0))
        except (ValueError, TypeError, AttributeError) as e:
            raise _undecodable("count", e)

    async def delete_scan(self, scan_type: ScanType, scan_id: str) -> None:
        await self._request("DELETE", f"/deepfence/scan/{scan_type.slug}/{scan_id}")

    async def download_scan(self, scan_type: ScanType, scan_id: str) -> Dict[str, Any]:
        response = await self._request("GET", f"/deepfence/scan/{scan_type.slug}/{scan_id}/download")
        # the export may stream the file itself; only a JSON body carries a link
        content_type = response.headers.get("content-type", "")
        if not response.content or not content_type.startswith("application/json"):
            return {}
        try:
            body = response.json()
        except ValueError as e:
            raise _undecodable("download", e)
        return body if isinstance(body, dict) else {}
