from typing import Optional

from supabase import AsyncClient

from inovaweek.api.v1.schemas.auth import PasswordResetScreen
from inovaweek.core.logger import logger
from inovaweek.services.auth import AuthService
from inovaweek.services.errors import AuthError
from inovaweek.views.messages import IDLE, ResetError, ResetMessage, ResetSuccess, to_screen_message
from inovaweek.views.navigation import Navigator

LOGIN_SCREEN = "Login"

TITLE = "Recuperar Senha"
SUBTITLE = "Insira seu email para receber as instruções de recuperação."
EMAIL_PLACEHOLDER = "Digite seu email"
SUBMIT_LABEL = "Enviar email de recuperação"
BACK_LABEL = "Voltar ao Login"

ERROR_PREFIX = "Erro ao enviar o email de recuperação: "
SUCCESS_TEXT = "Email de recuperação enviado com sucesso!"


class PasswordResetView:
    """
    Tela de recuperação de senha.

    Mantém o email digitado e uma única mensagem de resultado. Enquanto um
    pedido está em andamento, novos envios são ignorados.
    """

    def __init__(self, client: AsyncClient, navigator: Navigator, back_path: str = ""):
        self.client = client
        self.navigator = navigator
        self.back_path = back_path
        self.email = ""
        self.message: ResetMessage = IDLE
        self.pending = False

    def set_email(self, text: str) -> None:
        self.email = text

    async def submit_reset(self, email: Optional[str] = None) -> ResetMessage:
        """
        Envia o pedido de recuperação para o email informado (ou o já digitado).

        Args:
            email: Novo conteúdo do campo de email, se houver

        Returns:
            ResetMessage: Mensagem exibida após o pedido terminar
        """
        if email is not None:
            self.email = email

        if self.pending:
            logger.warning(f"[RECUPERAÇÃO DE SENHA] Envio ignorado, pedido anterior em andamento: {self.email}")
            return self.message

        self.pending = True
        try:
            await AuthService.request_password_reset(self.email, self.client)
        except AuthError as e:
            self.message = ResetError(ERROR_PREFIX + e.message)
        else:
            self.message = ResetSuccess(SUCCESS_TEXT)
        finally:
            self.pending = False

        return self.message

    def back_to_login(self) -> None:
        self.navigator.navigate(LOGIN_SCREEN)

    def render(self) -> PasswordResetScreen:
        return PasswordResetScreen(
            title=TITLE,
            subtitle=SUBTITLE,
            email=self.email,
            placeholder=EMAIL_PLACEHOLDER,
            submit_label=SUBMIT_LABEL,
            back_label=BACK_LABEL,
            back_path=self.back_path,
            pending=self.pending,
            message=to_screen_message(self.message),
        )
