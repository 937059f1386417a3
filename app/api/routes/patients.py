from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from app.api.deps import get_query_router
from app.core.entities import PATIENTS
from app.schemas.patient import PatientList
from app.services.query_router import QueryExecutionError, QueryRouter
from app.services.renderer import render_rows

router = APIRouter()


@router.get("/patients", response_model=PatientList)
def list_patients(query_router: QueryRouter = Depends(get_query_router)):
    try:
        rows = query_router.list_patients()
    except QueryExecutionError:
        return PlainTextResponse("Error retrieving patients", status_code=500)
    return render_rows(PATIENTS, rows)


@router.get("/patients/filter", response_model=PatientList)
def filter_patients(
    first_name: Optional[str] = None,
    query_router: QueryRouter = Depends(get_query_router),
):
    try:
        rows = query_router.filter_patients_by_first_name(first_name)
    except QueryExecutionError:
        return PlainTextResponse("Error filtering patients", status_code=500)
    return render_rows(PATIENTS, rows)
