"""
/usuarios API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database, get_db
from core.log import log_route

from . import schemas, service

router = APIRouter(prefix="/usuarios", dependencies=[Depends(log_route)])


@router.get("")
async def list_usuarios(database: Database = Depends(get_db)) -> list[schemas.UsuarioResponse]:
    return await service.list_usuarios(database)


@router.get("/{usuario_id}")
async def get_usuario(
    usuario_id: int,
    database: Database = Depends(get_db),
) -> schemas.UsuarioResponse:
    return await service.get_usuario(database, usuario_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_usuario(
    payload: schemas.UsuarioPayload | None = None,
    database: Database = Depends(get_db),
) -> schemas.UsuarioCreatedResponse:
    return await service.create_usuario(database, payload or schemas.UsuarioPayload())


@router.put("/{usuario_id}")
async def update_usuario(
    usuario_id: int,
    payload: schemas.UsuarioPayload | None = None,
    database: Database = Depends(get_db),
) -> dict:
    return await service.update_usuario(database, usuario_id, payload or schemas.UsuarioPayload())


@router.delete("/{usuario_id}")
async def delete_usuario(
    usuario_id: int,
    database: Database = Depends(get_db),
) -> dict:
    return await service.delete_usuario(database, usuario_id)
