"""Permission catalog routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from itsm_api.api.dependencies import CallerDep, HandlersDep
from itsm_api.api.responses import render

router = APIRouter(prefix="/permissions", tags=["permissions"])


@router.get("")
async def list_permissions(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    """List permissions, optionally filtered with ``?module=``."""
    return render(await handlers.permissions.get_all(caller, request.query_params))


@router.get("/code/{code}")
async def get_permission_by_code(code: str, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.permissions.get_by_code(caller, code))
