"""
Questao persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database


async def list_questoes(database: Database) -> list[dict]:
    return await database.fetch_all(
        """
        SELECT id, enunciado, disciplina, tema, nivel
        FROM questoes
        """
    )


async def get_questao(database: Database, questao_id: int, *, for_update: bool = False) -> dict | None:
    sql = """
        SELECT id, enunciado, disciplina, tema, nivel
        FROM questoes
        WHERE id = $1
        """
    if for_update:
        sql += "FOR UPDATE\n"
    return await database.fetch_one(sql, questao_id)


async def create_questao(
    database: Database,
    *,
    enunciado: str,
    disciplina: str,
    tema: str,
    nivel: str,
) -> dict:
    row = await database.fetch_one(
        """
        INSERT INTO questoes (enunciado, disciplina, tema, nivel)
        VALUES ($1, $2, $3, $4)
        RETURNING id, enunciado, disciplina, tema, nivel
        """,
        enunciado,
        disciplina,
        tema,
        nivel,
    )
    if row is None:
        raise RuntimeError("Failed to create questao.")
    return row


async def update_questao(
    database: Database,
    questao_id: int,
    *,
    enunciado: str,
    disciplina: str,
    tema: str,
    nivel: str,
) -> dict | None:
    return await database.fetch_one(
        """
        UPDATE questoes
        SET enunciado = $1,
            disciplina = $2,
            tema = $3,
            nivel = $4
        WHERE id = $5
        RETURNING id, enunciado, disciplina, tema, nivel
        """,
        enunciado,
        disciplina,
        tema,
        nivel,
        questao_id,
    )


async def delete_questao(database: Database, questao_id: int) -> bool:
    row = await database.fetch_one(
        """
        DELETE FROM questoes
        WHERE id = $1
        RETURNING id
        """,
        questao_id,
    )
    return row is not None
