from typing import List

import httpx
from pydantic import ValidationError
from supabase import AsyncClient, PostgrestAPIError

from inovaweek.core.config import settings
from inovaweek.core.logger import logger
from inovaweek.models import Group
from inovaweek.services.errors import FetchError

GROUPS_QUERY = """
    id,
    Tema,
    Dia,
    Aluno (
        nome
    ),
    Avaliacao (
        Nota
    )
"""


class GroupService:
    @staticmethod
    async def fetch_groups(client: AsyncClient) -> List[Group]:
        """
        Busca todos os grupos com os nomes dos alunos e as notas das avaliações.

        A ordem retornada pelo servidor é preservada.

        Args:
            client: Cliente assíncrono do Supabase

        Returns:
            List[Group]: Grupos na ordem do servidor

        Raises:
            FetchError: Erro do PostgREST, de rede ou resposta em formato inesperado
        """
        try:
            response = await client.table(settings.GROUPS_TABLE).select(GROUPS_QUERY).execute()
        except PostgrestAPIError as e:
            raise FetchError(e.message or str(e)) from e
        except httpx.HTTPError as e:
            raise FetchError(str(e)) from e

        try:
            groups = [Group.model_validate(row) for row in response.data or []]
        except ValidationError as e:
            raise FetchError(f"Resposta inválida da tabela {settings.GROUPS_TABLE}: {e.error_count()} erro(s)") from e

        logger.info(f"[BUSCA DE GRUPOS] Recebidos {len(groups)} grupos")
        return groups
