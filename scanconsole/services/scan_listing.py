# scanconsole/services/scan_listing.py
from datetime import datetime, timezone
from typing import Optional

from scanconsole.core.config import settings
from scanconsole.core.constants import ScanType
from scanconsole.core.exceptions import SearchServiceError
from scanconsole.core.logging import logger
from scanconsole.schemas.scan import ActionResult, DownloadReference, Notification, ScanPage
from scanconsole.services.normalizer import normalize_scan
from scanconsole.services.scan_query import (
    ScanFilterSelection,
    build_count_request,
    build_search_request,
    estimate_total_rows,
)
from scanconsole.services.search_client import SearchClient

GENERIC_ERROR_MESSAGE = "Something went wrong"


class ScanListingService:
    """Loads pages of scans and runs row actions against the search service"""

    def __init__(self, client: SearchClient, page_size: int = None):
        self.client = client
        self.page_size = page_size or settings.SCAN_PAGE_SIZE

    async def get_scans(self, scan_type: ScanType, selection: ScanFilterSelection) -> ScanPage:
        """
        Fetch one page plus an oversampled count.

        Raises:
            SearchServiceError: either remote call was rejected
        """
        request = build_search_request(selection, self.page_size)
        rows = await self.client.search_scans(scan_type, request)
        count = await self.client.count_scans(scan_type, build_count_request(request))

        return ScanPage(
            scans=[normalize_scan(row) for row in rows],
            current_page=selection.page,
            total_rows=estimate_total_rows(selection.page, self.page_size, count),
        )

    async def delete_scan(self, scan_type: ScanType, scan_id: str) -> ActionResult:
        try:
            await self.client.delete_scan(scan_type, scan_id)
        except SearchServiceError as e:
            logger.warning(f"Scan delete failed: {e.message or e.status_code}", extra={"scan_id": scan_id})
            return ActionResult(notifications=[
                Notification(level="error", message=e.message or GENERIC_ERROR_MESSAGE),
            ])

        logger.info("Scan deleted", extra={"scan_id": scan_id})
        return ActionResult(notifications=[
            Notification(level="success", message="Scan deleted successfully"),
        ])

    async def download_scan(
        self,
        scan_type: ScanType,
        scan_id: str,
        now: Optional[datetime] = None,
    ) -> ActionResult:
        try:
            export = await self.client.download_scan(scan_type, scan_id)
        except SearchServiceError as e:
            logger.warning(f"Scan download failed: {e.message or e.status_code}", extra={"scan_id": scan_id})
            return ActionResult(notifications=[
                Notification(level="error", message=e.message or GENERIC_ERROR_MESSAGE),
            ])

        now = now or datetime.now(timezone.utc)
        # TODO: the export service does not return a retrieval link yet; url stays unset until it does
        reference = DownloadReference(
            filename=f"{scan_type.slug}_scan_{int(now.timestamp())}",
            url=export.get("url"),
        )
        logger.info("Scan download started", extra={"scan_id": scan_id})
        return ActionResult(
            notifications=[Notification(level="success", message="Download is in progress")],
            download=reference,
        )
