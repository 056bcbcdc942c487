"""Statistics routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from itsm_api.api.dependencies import CallerDep, HandlersDep
from itsm_api.api.responses import render

router = APIRouter(prefix="/stats", tags=["statistics"])


@router.get("/overview")
async def get_overview(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.statistics.get_overview(caller, request.query_params))


@router.get("/workload")
async def get_workload(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.statistics.get_workload(caller, request.query_params))


@router.get("/performance")
async def get_performance(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.statistics.get_performance(caller, request.query_params))


@router.get("/trends")
async def get_trends(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    """Trend of ``?metric=`` over ``?period=`` (1month, 3months, 6months, year)."""
    return render(await handlers.statistics.get_trends(caller, request.query_params))


@router.get("/kpi")
async def get_kpi(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.statistics.get_kpi(caller, request.query_params))
