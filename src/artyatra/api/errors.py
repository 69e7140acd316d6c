"""JSON error responses shared by all routers."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """An error rendered as ``{"error": ..., "message": ...}``."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str | None = None,
        **extra: object,
    ) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.message = message
        self.extra = extra

    def body(self) -> dict[str, object]:
        """Return the JSON body for this error."""
        payload: dict[str, object] = {"error": self.error}
        if self.message is not None:
            payload["message"] = self.message
        payload.update(self.extra)
        return payload


def register_error_handlers(app: FastAPI) -> None:
    """Render API and validation errors as JSON error objects."""

    @app.exception_handler(ApiError)
    async def _api_error(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.body())

    @app.exception_handler(RequestValidationError)
    async def _validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"] if part != "body")
            messages.append(f"{field}: {error['msg']}" if field else error["msg"])
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "message": "; ".join(messages)},
        )
