"""Uniform JSON envelope shared by every handler."""

from fastapi.responses import JSONResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
}

ERROR_CATEGORIES = {
    400: "Bad Request",
    404: "Not Found",
    409: "Conflict",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def build_response(status_code: int, body: dict) -> JSONResponse:
    """JSON response with CORS headers, success or failure alike."""
    return JSONResponse(status_code=status_code, content=body, headers=CORS_HEADERS)


def success_response(status_code: int, message: str, data, **extra) -> JSONResponse:
    return build_response(status_code, {"exito": True, "mensaje": message, **extra, "datos": data})


def error_response(status_code: int, message: str, **context) -> JSONResponse:
    """`{error, mensaje, ...context}` where `error` is the HTTP category name."""
    return build_response(
        status_code,
        {"error": ERROR_CATEGORIES[status_code], "mensaje": message, **context},
    )


def error_detail(exc: Exception, expose: bool, fallback: str = "Error interno del servidor") -> str:
    """Raw failure message outside production, a generic one in production."""
    return str(exc) if expose else fallback
