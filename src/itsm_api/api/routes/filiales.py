"""Filiale routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from itsm_api.api.dependencies import CallerDep, HandlersDep
from itsm_api.api.responses import render

router = APIRouter(prefix="/filiales", tags=["filiales"])


@router.post("")
async def create_filiale(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    """Create a filiale (filiales.create)."""
    body = await request.body()
    return render(await handlers.filiales.create(caller, body))


@router.get("")
async def list_filiales(caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    """List filiales, restricted to the caller's own filiale without filiales.view_all."""
    return render(await handlers.filiales.get_all(caller))


@router.get("/active")
async def list_active_filiales(handlers: HandlersDep) -> JSONResponse:
    """List active filiales. Public."""
    return render(await handlers.filiales.get_active())


@router.get("/software-provider")
async def get_software_provider(caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.filiales.get_software_provider(caller))


@router.get("/code/{code}")
async def get_filiale_by_code(code: str, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.filiales.get_by_code(caller, code))


@router.get("/{filiale_id}")
async def get_filiale(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.filiales.get_by_id(caller, request.path_params))


@router.put("/{filiale_id}")
async def update_filiale(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.filiales.update(caller, request.path_params, body))


@router.delete("/{filiale_id}")
async def delete_filiale(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.filiales.delete(caller, request.path_params))
