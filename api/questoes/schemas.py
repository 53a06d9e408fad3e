"""
Questao API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel

from core.schemas import OptionalText

REQUIRED_FIELDS = ("enunciado", "disciplina", "tema", "nivel")


class QuestaoPayload(BaseModel):
    enunciado: OptionalText = None
    disciplina: OptionalText = None
    tema: OptionalText = None
    nivel: OptionalText = None


class QuestaoResponse(BaseModel):
    id: int
    enunciado: str
    disciplina: str
    tema: str
    nivel: str


class QuestaoCreatedResponse(BaseModel):
    mensagem: str
    questao: QuestaoResponse
