from typing import Dict, Optional, Protocol

from inovaweek.core.logger import logger


class Navigator(Protocol):
    def navigate(self, screen_name: str) -> None:
        ...


class RouteNavigator:
    """
    Navegador que traduz nomes de telas em caminhos HTTP.

    Guarda o último destino em ``current``; a rota de volta ao login
    redireciona o cliente para ele.
    """

    def __init__(self, routes: Dict[str, str]):
        self.routes = dict(routes)
        self.current: Optional[str] = None

    def path_for(self, screen_name: str) -> str:
        try:
            return self.routes[screen_name]
        except KeyError:
            logger.warning(f"[NAVEGAÇÃO] Tela desconhecida: {screen_name}")
            raise ValueError(f"Tela desconhecida: {screen_name}") from None

    def navigate(self, screen_name: str) -> None:
        self.current = self.path_for(screen_name)
        logger.debug(f"[NAVEGAÇÃO] {screen_name} -> {self.current}")
