"""
/questoes API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database, get_db
from core.log import log_route

from . import schemas, service

router = APIRouter(prefix="/questoes", dependencies=[Depends(log_route)])


@router.get("")
async def list_questoes(database: Database = Depends(get_db)) -> list[schemas.QuestaoResponse]:
    return await service.list_questoes(database)


@router.get("/{questao_id}")
async def get_questao(
    questao_id: int,
    database: Database = Depends(get_db),
) -> schemas.QuestaoResponse:
    return await service.get_questao(database, questao_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_questao(
    payload: schemas.QuestaoPayload | None = None,
    database: Database = Depends(get_db),
) -> schemas.QuestaoCreatedResponse:
    return await service.create_questao(database, payload or schemas.QuestaoPayload())


@router.put("/{questao_id}")
async def update_questao(
    questao_id: int,
    payload: schemas.QuestaoPayload | None = None,
    database: Database = Depends(get_db),
) -> dict:
    return await service.update_questao(database, questao_id, payload or schemas.QuestaoPayload())


@router.delete("/{questao_id}")
async def delete_questao(
    questao_id: int,
    database: Database = Depends(get_db),
) -> dict:
    return await service.delete_questao(database, questao_id)
