class ScreenError(Exception):
    """Falha de uma chamada ao backend, já com o texto que pode ser mostrado."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(ScreenError):
    pass


class FetchError(ScreenError):
    pass
