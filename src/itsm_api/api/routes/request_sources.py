"""Request source routes (settings)."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from itsm_api.api.dependencies import CallerDep, HandlersDep
from itsm_api.api.responses import render

router = APIRouter(prefix="/settings/sources", tags=["settings"])


@router.get("")
async def list_sources(caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.request_sources.get_all(caller))


@router.post("")
async def create_source(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.request_sources.create(caller, body))


@router.get("/{id}")
async def get_source(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.request_sources.get_by_id(caller, request.path_params))


@router.put("/{id}")
async def update_source(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.request_sources.update(caller, request.path_params, body))


@router.delete("/{id}")
async def delete_source(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.request_sources.delete(caller, request.path_params))
