class WidgetError(Exception):
    """Base class for every error raised by the widget core."""


class ConfigError(WidgetError):
    """A required configuration field is missing."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing configuration: {', '.join(self.missing)}")


class TokenFetchError(WidgetError):
    """The context token could not be fetched. Never leaves the session manager."""


class DispatchError(WidgetError):
    """Base class for failures of a single outbound chat message."""


class HttpError(DispatchError):
    def __init__(self, status: int):
        self.status = status
        super().__init__(f"HTTP error! status: {status}")


class NetworkError(DispatchError):
    pass


class DecodeError(DispatchError):
    pass
