"""
Error contract shared by every resource.

Services raise `ApiError` subclasses; `main.py` registers the handlers that
render them as JSON. Anything unexpected inside a service operation goes
through `dependency_guard`, which logs it and turns it into a generic 500.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Sequence

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_DATA = "Dados inválidos"
INTERNAL_ERROR = "Erro interno do servidor"


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def body(self) -> dict[str, Any]:
        raise NotImplementedError


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, required: Sequence[str], missing: Sequence[str] = ()) -> None:
        self.required = list(required)
        self.missing = list(missing)
        super().__init__(self.mensagem)

    @property
    def mensagem(self) -> str:
        return f"Todos os campos ({', '.join(self.required)}) são obrigatórios."

    def body(self) -> dict[str, Any]:
        return {"erro": INVALID_DATA, "mensagem": self.mensagem, "campos": self.missing}


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, mensagem: str) -> None:
        self.mensagem = mensagem
        super().__init__(mensagem)

    def body(self) -> dict[str, Any]:
        return {"mensagem": self.mensagem}


class DependencyError(ApiError):
    """A database failure. The body never carries the underlying detail."""

    def __init__(self, mensagem: str | None = None) -> None:
        self.mensagem = mensagem
        super().__init__(mensagem or INTERNAL_ERROR)

    def body(self) -> dict[str, Any]:
        if self.mensagem:
            return {"erro": INTERNAL_ERROR, "mensagem": self.mensagem}
        return {"erro": INTERNAL_ERROR}


@contextmanager
def dependency_guard(log_message: str, *, mensagem: str | None = None) -> Iterator[None]:
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        logger.exception(log_message)
        raise DependencyError(mensagem) from exc


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_rejected path=%s errors=%d", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"erro": INVALID_DATA, "mensagem": "Corpo ou parâmetros da requisição inválidos."},
    )
