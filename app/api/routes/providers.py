from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from app.api.deps import get_query_router
from app.core.entities import PROVIDERS
from app.schemas.provider import ProviderList
from app.services.query_router import QueryExecutionError, QueryRouter
from app.services.renderer import render_rows

router = APIRouter()


@router.get("/providers", response_model=ProviderList)
def list_providers(query_router: QueryRouter = Depends(get_query_router)):
    try:
        rows = query_router.list_providers()
    except QueryExecutionError:
        return PlainTextResponse("Error retrieving providers", status_code=500)
    return render_rows(PROVIDERS, rows)


@router.get("/providers/filter", response_model=ProviderList)
def filter_providers(
    provider_specialty: Optional[str] = None,
    query_router: QueryRouter = Depends(get_query_router),
):
    try:
        rows = query_router.filter_providers_by_specialty(provider_specialty)
    except QueryExecutionError:
        return PlainTextResponse("Error retrieving providers", status_code=500)
    return render_rows(PROVIDERS, rows)
