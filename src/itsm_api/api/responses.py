"""Turn handler results into HTTP responses."""

from fastapi.responses import JSONResponse

from itsm_api.handlers import HandlerResult


def render(result: HandlerResult) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.envelope.to_content())
