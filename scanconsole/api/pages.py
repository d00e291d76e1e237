# scanconsole/api/pages.py
"""Server-rendered scan listing table"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from scanconsole.api.dependencies import get_listing_service, get_scan_type
from scanconsole.api.v1.scans import load_scan_page, run_scan_action
from scanconsole.core.constants import FILTER_PARAMS, ScanType
from scanconsole.core.exceptions import ValidationError
from scanconsole.schemas.scan import Notification
from scanconsole.services.scan_listing import ScanListingService
from scanconsole.views.query_state import QueryState
from scanconsole.views.scan_table import format_milliseconds, status_label, table_context

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.filters["format_ms"] = format_milliseconds
templates.env.filters["status_label"] = status_label

router = APIRouter()


async def render_listing(
    request: Request,
    scan_type: ScanType,
    service: ScanListingService,
    state: QueryState,
    notifications=None,
    download=None,
) -> HTMLResponse:
    page = await load_scan_page(service, scan_type, state)
    context = table_context(state, page, service.page_size)
    context.update({
        "title": f"{scan_type.slug.capitalize()} scans",
        "scan_type": scan_type,
        "notifications": notifications or [],
        "download": download,
    })
    return templates.TemplateResponse(request, "scans.html", context)


@router.get("/scans/{scan_type}", response_class=HTMLResponse)
async def scans_page(
    request: Request,
    scan_type: ScanType = Depends(get_scan_type),
    service: ScanListingService = Depends(get_listing_service),
):
    state = QueryState.from_items(request.query_params.multi_items())
    return await render_listing(request, scan_type, service, state)


@router.post("/scans/{scan_type}/filters")
async def add_filter_value(
    scan_type: ScanType = Depends(get_scan_type),
    facet: str = Form(...),
    value: str = Form(""),
    query: str = Form(""),
):
    """Add one value to a multi-select facet and redirect to the resulting query"""
    if facet not in FILTER_PARAMS:
        raise ValidationError(f"Invalid filter '{facet}'")
    state = QueryState.from_query_string(query)
    value = value.strip()
    if value:
        state = state.select_facet(facet, state.get_all(facet) + [value])
    target = f"/scans/{scan_type.slug}"
    query_string = state.to_query_string()
    if query_string:
        target = f"{target}?{query_string}"
    return RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/scans/{scan_type}/actions", response_class=HTMLResponse)
async def scans_page_action(
    request: Request,
    action_type: Optional[str] = Form(None, alias="actionType"),
    scan_id: Optional[str] = Form(None, alias="scanId"),
    node_id: Optional[str] = Form(None, alias="nodeId"),
    query: str = Form(""),
    scan_type: ScanType = Depends(get_scan_type),
    service: ScanListingService = Depends(get_listing_service),
):
    """Run a row action, then re-render the listing with its notifications"""
    try:
        result = await run_scan_action(service, scan_type, action_type, scan_id, node_id)
        notifications, download = result.notifications, result.download
    except ValidationError as e:
        notifications, download = [Notification(level="error", message=e.message)], None

    state = QueryState.from_query_string(query)
    return await render_listing(request, scan_type, service, state, notifications, download)


@router.get("/", include_in_schema=False)
async def index():
    return RedirectResponse(f"/scans/{ScanType.SECRET.slug}")


