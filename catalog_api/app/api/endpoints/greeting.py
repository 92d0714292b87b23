"""Plain-text greeting routes, handy as a liveness check."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from catalog_api.app.core.config import settings

router = APIRouter()

HELLO = "Hello from FastAPI"


@router.get("", response_class=PlainTextResponse)
def hello() -> str:
    return HELLO


@router.get("/hello/{name}", response_class=PlainTextResponse)
def custom_hello(name: str) -> str:
    return f"{settings.greeting} {name}, {HELLO}"
