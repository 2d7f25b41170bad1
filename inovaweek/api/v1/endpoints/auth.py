from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from supabase import AsyncClient

from inovaweek.api.v1.schemas.auth import PasswordResetRequest, PasswordResetScreen
from inovaweek.core.config import settings
from inovaweek.core.logger import logger
from inovaweek.core.supabase import get_supabase
from inovaweek.views.navigation import RouteNavigator
from inovaweek.views.password_reset import LOGIN_SCREEN, PasswordResetView

router = APIRouter(prefix="/auth", tags=["Auth"])


def build_password_reset_view(client: AsyncClient) -> PasswordResetView:
    navigator = RouteNavigator({LOGIN_SCREEN: settings.LOGIN_PATH})
    return PasswordResetView(client, navigator, back_path=navigator.path_for(LOGIN_SCREEN))


@router.get("/forgot-password", response_model=PasswordResetScreen, status_code=status.HTTP_200_OK)
async def get_forgot_password(client: AsyncClient = Depends(get_supabase)):
    """
    Tela de recuperação de senha no estado inicial, sem mensagem.
    """
    return build_password_reset_view(client).render()


@router.post("/forgot-password", response_model=PasswordResetScreen, status_code=status.HTTP_200_OK)
async def forgot_password(
        data: PasswordResetRequest,
        client: AsyncClient = Depends(get_supabase)
):
    """
    Solicita o email de recuperação de senha.

    Recusas do provedor não são erros HTTP: o resultado vai na mensagem da tela.

    Args:
        data: Email digitado pelo usuário
        client: Cliente assíncrono do Supabase

    Returns:
        PasswordResetScreen: Tela com a mensagem de erro ou de sucesso

    Raises:
        HTTPException: 500 - Erro interno inesperado
    """
    view = build_password_reset_view(client)
    try:
        await view.submit_reset(data.email)
    except Exception as e:
        logger.error(f"[RECUPERAÇÃO DE SENHA] Erro inesperado ao solicitar recuperação: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ocorreu um erro ao solicitar a recuperação de senha"
        ) from e

    return view.render()


@router.get("/forgot-password/back", status_code=status.HTTP_303_SEE_OTHER)
async def back_to_login(client: AsyncClient = Depends(get_supabase)):
    """
    Volta da tela de recuperação para a tela de login.
    """
    view = build_password_reset_view(client)
    view.back_to_login()
    return RedirectResponse(url=view.navigator.current, status_code=status.HTTP_303_SEE_OTHER)
