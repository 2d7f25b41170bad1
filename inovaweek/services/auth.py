from typing import Optional

import httpx
from supabase import AsyncClient, AuthError as SupabaseAuthError

from inovaweek.core.config import settings
from inovaweek.core.logger import logger
from inovaweek.services.errors import AuthError


class AuthService:
    @staticmethod
    async def request_password_reset(
            email: str,
            client: AsyncClient,
            redirect_to: Optional[str] = None
    ) -> None:
        """
        Solicita ao Supabase Auth o envio do email de recuperação de senha.

        O email não é validado aqui; o provedor decide se o endereço é aceito.

        Args:
            email: Endereço digitado pelo usuário
            client: Cliente assíncrono do Supabase
            redirect_to: URL para onde o link do email deve levar

        Raises:
            AuthError: O provedor recusou o pedido ou não respondeu
        """
        redirect_to = redirect_to or settings.PASSWORD_RESET_REDIRECT_URL
        options = {"redirect_to": redirect_to} if redirect_to else {}

        try:
            await client.auth.reset_password_for_email(email, options)
        except SupabaseAuthError as e:
            logger.warning(f"[RECUPERAÇÃO DE SENHA] Provedor recusou o pedido para {email}: {e.message}")
            raise AuthError(e.message) from e
        except httpx.HTTPError as e:
            logger.error(f"[RECUPERAÇÃO DE SENHA] Falha de comunicação com o Supabase: {str(e)}")
            raise AuthError(str(e)) from e

        logger.info(f"[RECUPERAÇÃO DE SENHA] Email de recuperação solicitado para {email}")
