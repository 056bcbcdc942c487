"""Service request and service-request type routes.

Type routes are declared before ``/{id}`` so that ``/types`` is never
read as a service request id.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from itsm_api.api.dependencies import CallerDep, HandlersDep
from itsm_api.api.responses import render

router = APIRouter(prefix="/service-requests", tags=["service-requests"])


# Types

@router.get("/types")
async def list_types(caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.service_request_types.get_all(caller))


@router.post("/types")
async def create_type(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.service_request_types.create(caller, body))


@router.get("/types/{id}")
@router.get("/type/{id}", include_in_schema=False)
async def get_type(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.service_request_types.get_by_id(caller, request.path_params))


@router.put("/types/{id}")
@router.put("/type/{id}", include_in_schema=False)
async def update_type(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    body = await request.body()
    return render(await handlers.service_request_types.update(caller, request.path_params, body))


@router.delete("/types/{id}")
@router.delete("/type/{id}", include_in_schema=False)
async def delete_type(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.service_request_types.delete(caller, request.path_params))


# Service requests

@router.get("")
async def list_service_requests(caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.service_requests.get_all(caller))


@router.post("")
async def create_service_request(
    request: Request,
    caller: CallerDep,
    handlers: HandlersDep,
) -> JSONResponse:
    body = await request.body()
    return render(await handlers.service_requests.create(caller, body))


@router.get("/{id}")
async def get_service_request(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    return render(await handlers.service_requests.get_by_id(caller, request.path_params))


@router.put("/{id}")
async def update_service_request(
    request: Request,
    caller: CallerDep,
    handlers: HandlersDep,
) -> JSONResponse:
    body = await request.body()
    return render(await handlers.service_requests.update(caller, request.path_params, body))


@router.delete("/{id}")
async def delete_service_request(
    request: Request,
    caller: CallerDep,
    handlers: HandlersDep,
) -> JSONResponse:
    return render(await handlers.service_requests.delete(caller, request.path_params))


@router.post("/{id}/validate")
async def validate_service_request(
    request: Request,
    caller: CallerDep,
    handlers: HandlersDep,
) -> JSONResponse:
    body = await request.body()
    return render(await handlers.service_requests.validate(caller, request.path_params, body))


@router.get("/{id}/deadline")
async def get_deadline(request: Request, caller: CallerDep, handlers: HandlersDep) -> JSONResponse:
    """Remaining processing time before the deadline, in days."""
    return render(await handlers.service_requests.get_deadline(caller, request.path_params))


@router.get("/{id}/validation-status")
async def get_validation_status(
    request: Request,
    caller: CallerDep,
    handlers: HandlersDep,
) -> JSONResponse:
    return render(await handlers.service_requests.get_validation_status(caller, request.path_params))
