"""Knowledge-base category routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from itsm_api.api.dependencies import CallerDep, HandlersDep
from itsm_api.api.responses import render

router = APIRouter(prefix="/knowledge-base/categories", tags=["knowledge-base"])


@router.get("")
async def list_categories(caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.knowledge_categories.get_all(caller))


@router.post("")
async def create_category(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.knowledge_categories.create(caller, body))


@router.get("/{id}")
async def get_category(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.knowledge_categories.get_by_id(caller, request.path_params))


@router.put("/{id}")
async def update_category(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.knowledge_categories.update(caller, request.path_params, body))


@router.delete("/{id}")
async def delete_category(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.knowledge_categories.delete(caller, request.path_params))
