from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Path, Query, Body
from supabase import AsyncClient

from inovaweek.api.v1.schemas.group import GroupListScreen, ToggleRequest, ToggleResponse
from inovaweek.core.logger import logger
from inovaweek.core.supabase import get_supabase
from inovaweek.views.group_list import GroupListView, toggled

router = APIRouter(prefix="/group", tags=["Group"])


@router.get("/", response_model=GroupListScreen, status_code=status.HTTP_200_OK)
async def get_groups(
        expanded: List[int] = Query(default=[], description="Grupos com o painel de detalhes aberto"),
        client: AsyncClient = Depends(get_supabase)
):
    """
    Tela inicial com a lista de grupos.

    Falhas da busca aparecem como texto de erro na tela, não como erro HTTP.

    Args:
        expanded: Identificadores dos grupos a expandir após a busca
        client: Cliente assíncrono do Supabase

    Returns:
        GroupListScreen: Cartões dos grupos na ordem do servidor

    Raises:
        HTTPException: 500 - Erro interno inesperado
    """
    view = GroupListView(client)
    try:
        await view.mount()
    except Exception as e:
        logger.error(f"[BUSCA DE GRUPOS] Erro inesperado ao montar a lista de grupos: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ocorreu um erro ao buscar os grupos"
        ) from e

    for group_id in dict.fromkeys(expanded):
        view.toggle_expand(group_id)

    return view.render()


@router.post("/{group_id}/toggle", response_model=ToggleResponse, status_code=status.HTTP_200_OK)
async def toggle_group(
        group_id: int = Path(..., description="Identificador do grupo"),
        data: ToggleRequest = Body(...)
):
    """
    Alterna o painel de detalhes de um grupo sem consultar o backend.

    Args:
        group_id: Grupo a alternar
        data: Conjunto atual de grupos expandidos

    Returns:
        ToggleResponse: Novo conjunto de grupos expandidos
    """
    expanded = toggled(set(data.expanded), group_id)
    return ToggleResponse(group_id=group_id, expanded=sorted(expanded))
