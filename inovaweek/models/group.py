from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .evaluation import Evaluation
from .student import Student


class Group(BaseModel):
    """
    Grupo da InovaWeek com alunos e avaliações aninhados.

    Os nomes dos campos na tabela ``Grupo`` são usados como aliases, assim uma
    linha retornada pelo PostgREST é validada diretamente. Só o ``id`` é
    obrigatório; colunas nulas aparecem como texto vazio na tela.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    topic: Optional[str] = Field(default=None, alias="Tema")
    date: Optional[str] = Field(default=None, alias="Dia")
    students: Tuple[Student, ...] = Field(default=(), alias="Aluno")
    evaluations: Tuple[Evaluation, ...] = Field(default=(), alias="Avaliacao")

    @field_validator("students", "evaluations", mode="before")
    @classmethod
    def null_relation_as_empty(cls, value):
        return value if value is not None else ()
