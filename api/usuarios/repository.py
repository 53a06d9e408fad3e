"""
Usuario persistence helpers.

Public queries never select `senha`; only the merge step of an update reads
the stored hash back.
"""

from __future__ import annotations

from core.db import Database


async def list_usuarios(database: Database) -> list[dict]:
    return await database.fetch_all(
        """
        SELECT id, nome, email
        FROM usuarios
        """
    )


async def get_usuario(database: Database, usuario_id: int) -> dict | None:
    return await database.fetch_one(
        """
        SELECT id, nome, email
        FROM usuarios
        WHERE id = $1
        """,
        usuario_id,
    )


async def lock_usuario(database: Database, usuario_id: int) -> dict | None:
    """
    Read the full row (hash included) and lock it for the running transaction.
    """
    return await database.fetch_one(
        """
        SELECT id, nome, email, senha
        FROM usuarios
        WHERE id = $1
        FOR UPDATE
        """,
        usuario_id,
    )


async def create_usuario(database: Database, *, nome: str, email: str, senha_hash: str) -> dict:
    row = await database.fetch_one(
        """
        INSERT INTO usuarios (nome, email, senha)
        VALUES ($1, $2, $3)
        RETURNING id, nome, email
        """,
        nome,
        email,
        senha_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create usuario.")
    return row


async def update_usuario(
    database: Database,
    usuario_id: int,
    *,
    nome: str,
    email: str,
    senha: str,
) -> dict | None:
    return await database.fetch_one(
        """
        UPDATE usuarios
        SET nome = $1,
            email = $2,
            senha = $3
        WHERE id = $4
        RETURNING id, nome, email
        """,
        nome,
        email,
        senha,
        usuario_id,
    )


async def delete_usuario(database: Database, usuario_id: int) -> bool:
    row = await database.fetch_one(
        """
        DELETE FROM usuarios
        WHERE id = $1
        RETURNING id
        """,
        usuario_id,
    )
    return row is not None
