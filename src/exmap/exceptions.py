"""Custom exception hierarchy for ex command resolution."""


class ExMapError(Exception):
    """Base exception for all ex map errors."""


class ConfigError(ExMapError):
    """Raised when settings or command definitions fail to load."""


class InvalidOperation(ExMapError):
    """Raised when a mapping is constructed or mutated against its contract."""


class CommandNotFoundError(ExMapError):
    """Raised when a token matches no command in the current scope."""

    def __init__(self, token: str, available: list[str] | None = None) -> None:
        self.token = token
        self.available = available or []
        super().__init__(f"Not an editor command: {token}")


class AmbiguousCommandError(ExMapError):
    """Raised when a token is a prefix of two or more distinct commands."""

    def __init__(self, token: str, candidates: list[str]) -> None:
        self.token = token
        self.candidates = candidates
        super().__init__(
            f"Ambiguous command: {token}. Could be: {', '.join(candidates)}"
        )


class UnknownMappingError(ExMapError):
    """Raised when a hint is requested for a mapping the map does not hold."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Mapping not in this map: {name}")
