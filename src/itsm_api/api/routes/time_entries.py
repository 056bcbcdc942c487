"""Time entry routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from itsm_api.api.dependencies import CallerDep, HandlersDep
from itsm_api.api.responses import render

router = APIRouter(prefix="/time-entries", tags=["time-entries"])


@router.get("")
async def list_time_entries(caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.time_entries.get_all(caller))


@router.post("")
async def create_time_entry(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.time_entries.create(caller, body))


@router.get("/{id}")
async def get_time_entry(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.time_entries.get_by_id(caller, request.path_params))


@router.delete("/{id}")
async def delete_time_entry(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.time_entries.delete(caller, request.path_params))


@router.post("/{id}/validate")
async def validate_time_entry(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.time_entries.validate(caller, request.path_params, body))
