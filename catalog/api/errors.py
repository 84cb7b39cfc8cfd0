from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def format_validation_errors(errors) -> dict[str, list[str]]:
    """
    Group validation messages by field.

    The leading location segment ("body", "query", "path") is dropped, so a
    bad ``price`` in a request body is reported under ``price``.
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        field = ".".join(loc) or "request"
        grouped.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return grouped


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 with field-level messages."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({
            "title": "One or more validation errors occurred.",
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": format_validation_errors(exc.errors()),
        }),
    )
