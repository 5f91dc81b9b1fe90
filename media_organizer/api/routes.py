import logging
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import FileResponse

from media_organizer.core.common.enums import MediaKind
from media_organizer.core.common.errors import MediaOrganizerError, ScanInProgressError
from media_organizer.features.catalog.domain.interfaces import ICatalogStore
from media_organizer.features.source_scanner.service.scanner import ScanEngine
from .schemas import MediaItem, ScanRequestBody, ScanResponse, StatsResponse

logger = logging.getLogger(__name__)

INDEX_HTML = Path(__file__).resolve().parent / "static" / "index.html"

router = APIRouter(tags=["media"])


def get_store(request: Request) -> ICatalogStore:
    return request.app.state.store


def get_scanner(request: Request) -> ScanEngine:
    return request.app.state.scanner


def _raise_service_error(exc: MediaOrganizerError):
    detail = str(exc) or exc.__class__.__name__
    raise HTTPException(status_code=exc.status_code, detail=detail)


@router.get("/api/media", response_model=List[MediaItem])
def list_media(
    type: Optional[MediaKind] = Query(None, description="Restrict the list to one media kind"),
    store: ICatalogStore = Depends(get_store),
):
    return [MediaItem.from_record(r) for r in store.list_all(type)]


@router.post("/api/scan", response_model=ScanResponse)
def scan_directory(
    req: ScanRequestBody,
    request: Request,
    scanner: ScanEngine = Depends(get_scanner),
):
    path = req.path.strip()
    if not path:
        raise HTTPException(status_code=400, detail="Path is required")

    # The core does not serialize scans; only one may run per process
    lock = request.app.state.scan_lock
    if not lock.acquire(blocking=False):
        _raise_service_error(ScanInProgressError())

    try:
        summary = scanner.scan(path)
    except MediaOrganizerError as exc:
        logger.error(f"Failed to scan directory {path}: {exc}")
        _raise_service_error(exc)
    finally:
        lock.release()

    return ScanResponse(
        success=True,
        count=summary.added_count,
        message=f"Successfully scanned and added {summary.added_count} items",
    )


@router.get("/api/stats", response_model=StatsResponse)
def get_stats(store: ICatalogStore = Depends(get_store)):
    return StatsResponse.from_stats(store.count_by_kind())


@router.get("/", include_in_schema=False)
def serve_index():
    return FileResponse(INDEX_HTML, media_type="text/html")


@router.get("/health")
def health():
    return {"status": "ok"}
