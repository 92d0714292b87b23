"""
Load-generation endpoints.

Both routes fabricate their payload on every call.  ``/large-object``
bypasses response-model validation and encodes its dict directly, as
re-validating millions of integers would dominate the request time.
"""

from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from catalog_api.app.dependencies import get_performance_service
from catalog_api.app.schemas.person import PersonRead
from catalog_api.app.services.performance_service import PerformanceService

router = APIRouter()


@router.get("/persons", response_model=List[PersonRead])
def generate_persons(
    count: Optional[int] = Query(None, description="Number of persons; defaults to 10000 when absent or not positive"),
    service: PerformanceService = Depends(get_performance_service),
) -> List[PersonRead]:
    return [PersonRead.model_validate(person) for person in service.generate_persons(count)]


@router.get("/large-object")
def large_object(service: PerformanceService = Depends(get_performance_service)) -> JSONResponse:
    return JSONResponse(content=asdict(service.build_large_object()))
