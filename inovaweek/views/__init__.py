from .group_list import GroupListView, color_index, group_color
from .messages import IDLE, Idle, ResetError, ResetMessage, ResetSuccess
from .navigation import Navigator, RouteNavigator
from .password_reset import PasswordResetView

__all__ = [
    "GroupListView",
    "IDLE",
    "Idle",
    "Navigator",
    "PasswordResetView",
    "ResetError",
    "ResetMessage",
    "ResetSuccess",
    "RouteNavigator",
    "color_index",
    "group_color",
]
