"""
Usuario API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel

from core.schemas import OptionalText

REQUIRED_FIELDS = ("nome", "email", "senha")


class UsuarioPayload(BaseModel):
    # Every field is optional at the schema level; presence rules live in the service.
    nome: OptionalText = None
    email: OptionalText = None
    senha: OptionalText = None


class UsuarioResponse(BaseModel):
    id: int
    nome: str
    email: str


class UsuarioCreatedResponse(BaseModel):
    mensagem: str
    usuario: UsuarioResponse
