"""Signed resume downloads."""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse

from marketplace.core.exceptions import MarketplaceError, to_http_exception
from marketplace.services.resume_store import ResumeStore, get_resume_store

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get("/{key:path}")
async def download_resume(
    key: str,
    expires: int = Query(...),
    signature: str = Query(...),
    store: ResumeStore = Depends(get_resume_store),
):
    """Serve a resume if the link is correctly signed and not expired."""
    if not store.verify(key, expires, signature):
        raise HTTPException(status_code=403, detail="Link is invalid or has expired")
    try:
        path = store.open_path(key)
    except MarketplaceError as e:
        raise to_http_exception(e)
    return FileResponse(path, filename=path.name)
