"""
Questao business logic.
"""

from __future__ import annotations

from core import errors, validation
from core.db import Database

from . import repository, schemas

NOT_FOUND = "Questão não encontrada"


def _to_response(row: dict) -> schemas.QuestaoResponse:
    return schemas.QuestaoResponse(**{key: row[key] for key in ("id", *schemas.REQUIRED_FIELDS)})


async def list_questoes(database: Database) -> list[schemas.QuestaoResponse]:
    with errors.dependency_guard(
        "Erro ao buscar questões",
        mensagem="Não foi possível buscar as questões",
    ):
        rows = await repository.list_questoes(database)
    return [_to_response(row) for row in rows]


async def get_questao(database: Database, questao_id: int) -> schemas.QuestaoResponse:
    with errors.dependency_guard("Erro ao buscar questão"):
        row = await repository.get_questao(database, questao_id)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return _to_response(row)


async def create_questao(
    database: Database,
    payload: schemas.QuestaoPayload,
) -> schemas.QuestaoCreatedResponse:
    data = payload.model_dump()
    missing = validation.missing_fields(data, schemas.REQUIRED_FIELDS)
    if missing:
        raise errors.ValidationError(schemas.REQUIRED_FIELDS, missing)

    with errors.dependency_guard("Erro ao inserir questão"):
        row = await repository.create_questao(database, **data)
    return schemas.QuestaoCreatedResponse(
        mensagem="Questão criada com sucesso!",
        questao=_to_response(row),
    )


async def update_questao(
    database: Database,
    questao_id: int,
    payload: schemas.QuestaoPayload,
) -> dict[str, str]:
    data = payload.model_dump()
    with errors.dependency_guard("Erro ao atualizar questão"):
        async with database.transaction() as tx:
            current = await repository.get_questao(tx, questao_id, for_update=True)
            if current is None:
                raise errors.NotFoundError(NOT_FOUND)
            merged = validation.merge_update(current, data, schemas.REQUIRED_FIELDS)
            await repository.update_questao(tx, questao_id, **merged)
    return {"message": "Questão atualizada com sucesso!"}


async def delete_questao(database: Database, questao_id: int) -> dict[str, str]:
    with errors.dependency_guard("Erro ao excluir questão"):
        deleted = await repository.delete_questao(database, questao_id)
    if not deleted:
        raise errors.NotFoundError(NOT_FOUND)
    return {"mensagem": "Questão excluida com sucesso!!"}
