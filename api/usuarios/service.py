"""
Usuario business logic.
"""

from __future__ import annotations

from core import errors, validation
from core.db import Database

from . import repository, schemas, security

NOT_FOUND = "Usuário não encontrado"


def _to_response(row: dict) -> schemas.UsuarioResponse:
    return schemas.UsuarioResponse(
        id=int(row["id"]),
        nome=str(row["nome"]),
        email=str(row["email"]),
    )


async def list_usuarios(database: Database) -> list[schemas.UsuarioResponse]:
    with errors.dependency_guard(
        "Erro ao buscar usuários",
        mensagem="Não foi possível buscar os usuários",
    ):
        rows = await repository.list_usuarios(database)
    return [_to_response(row) for row in rows]


async def get_usuario(database: Database, usuario_id: int) -> schemas.UsuarioResponse:
    with errors.dependency_guard("Erro ao buscar usuário"):
        row = await repository.get_usuario(database, usuario_id)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return _to_response(row)


async def create_usuario(
    database: Database,
    payload: schemas.UsuarioPayload,
) -> schemas.UsuarioCreatedResponse:
    data = payload.model_dump()
    missing = validation.missing_fields(data, schemas.REQUIRED_FIELDS)
    if missing:
        raise errors.ValidationError(schemas.REQUIRED_FIELDS, missing)

    with errors.dependency_guard("Erro ao inserir usuário"):
        row = await repository.create_usuario(
            database,
            nome=data["nome"],
            email=data["email"],
            senha_hash=security.hash_password(data["senha"]),
        )
    return schemas.UsuarioCreatedResponse(
        mensagem="Usuário criado com sucesso!",
        usuario=_to_response(row),
    )


async def update_usuario(
    database: Database,
    usuario_id: int,
    payload: schemas.UsuarioPayload,
) -> dict[str, str]:
    data = payload.model_dump()
    with errors.dependency_guard("Erro ao atualizar usuário"):
        async with database.transaction() as tx:
            current = await repository.lock_usuario(tx, usuario_id)
            if current is None:
                raise errors.NotFoundError(NOT_FOUND)
            # A new senha is hashed; without one the stored hash is kept as is.
            if data["senha"]:
                data["senha"] = security.hash_password(data["senha"])
            merged = validation.merge_update(current, data, schemas.REQUIRED_FIELDS)
            await repository.update_usuario(tx, usuario_id, **merged)
    return {"message": "Usuário atualizado com sucesso!"}


async def delete_usuario(database: Database, usuario_id: int) -> dict[str, str]:
    with errors.dependency_guard("Erro ao excluir usuário"):
        deleted = await repository.delete_usuario(database, usuario_id)
    if not deleted:
        raise errors.NotFoundError(NOT_FOUND)
    return {"mensagem": "Usuário excluído com sucesso!!"}
