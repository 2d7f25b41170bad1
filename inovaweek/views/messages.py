from dataclasses import dataclass
from typing import Optional, Union

from inovaweek.api.v1.schemas.auth import MessageKind, ScreenMessage

ERROR_COLOR = "red"
SUCCESS_COLOR = "green"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class ResetError:
    text: str


@dataclass(frozen=True)
class ResetSuccess:
    text: str


# Apenas uma mensagem por vez: erro e sucesso não coexistem.
ResetMessage = Union[Idle, ResetError, ResetSuccess]

IDLE = Idle()


def to_screen_message(message: ResetMessage) -> Optional[ScreenMessage]:
    if isinstance(message, ResetError):
        return ScreenMessage(kind=MessageKind.ERROR, text=message.text, color=ERROR_COLOR)
    if isinstance(message, ResetSuccess):
        return ScreenMessage(kind=MessageKind.SUCCESS, text=message.text, color=SUCCESS_COLOR)
    return None
