from fastapi import APIRouter
from fastapi.responses import RedirectResponse

router = APIRouter(tags=["API"])


@router.get("/", include_in_schema=False)
def welcome():
    return RedirectResponse("/docs")


@router.get("/health")
def health():
    return {"ok": True}
