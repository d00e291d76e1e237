# scanconsole/api/v1/scans.py
from fastapi import APIRouter, Depends, Form, Request
from typing import Optional

from scanconsole.api.dependencies import get_listing_service, get_scan_type
from scanconsole.core.constants import ActionType, ScanType
from scanconsole.core.exceptions import SearchServiceError, ValidationError
from scanconsole.schemas.scan import ActionResult, ScanPage
from scanconsole.services.scan_listing import GENERIC_ERROR_MESSAGE, ScanListingService
from scanconsole.views.query_state import QueryState

router = APIRouter()


async def load_scan_page(service: ScanListingService, scan_type: ScanType, state: QueryState) -> ScanPage:
    """Run the listing pipeline; a rejected search becomes a message on an empty page"""
    try:
        return await service.get_scans(scan_type, state.selection())
    except SearchServiceError as e:
        return ScanPage(current_page=state.page(), message=e.message or GENERIC_ERROR_MESSAGE)


async def run_scan_action(
    service: ScanListingService,
    scan_type: ScanType,
    action_type: Optional[str],
    scan_id: Optional[str],
    node_id: Optional[str],
) -> ActionResult:
    if not action_type or not scan_id or not node_id:
        raise ValidationError("Invalid action")

    if action_type == ActionType.DELETE.value:
        return await service.delete_scan(scan_type, scan_id)
    if action_type == ActionType.DOWNLOAD.value:
        return await service.download_scan(scan_type, scan_id)

    raise ValidationError("Invalid action")


@router.get("/{scan_type}", response_model=ScanPage)
async def list_scans(
    request: Request,
    scan_type: ScanType = Depends(get_scan_type),
    service: ScanListingService = Depends(get_listing_service),
):
    """
    One page of scans filtered by the query string
    (status, hosts, containers, containerImages, languages, clusters,
    nodeType, page, sortby, desc).
    """
    state = QueryState.from_items(request.query_params.multi_items())
    return await load_scan_page(service, scan_type, state)


@router.post("/{scan_type}/actions", response_model=ActionResult)
async def scan_action(
    action_type: Optional[str] = Form(None, alias="actionType"),
    scan_id: Optional[str] = Form(None, alias="scanId"),
    node_id: Optional[str] = Form(None, alias="nodeId"),
    scan_type: ScanType = Depends(get_scan_type),
    service: ScanListingService = Depends(get_listing_service),
):
    """Delete or download the results of one scan"""
    return await run_scan_action(service, scan_type, action_type, scan_id, node_id)
