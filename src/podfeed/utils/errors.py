"""Custom exceptions for podfeed."""


class PodfeedError(Exception):
    """Base exception for all podfeed errors."""

    pass


class ConfigError(PodfeedError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class NamespaceConflictError(PodfeedError):
    """Raised when two namespace parsers claim the same namespace.

    Attributes:
        namespace: The namespace prefix both parsers are registered for.
        parsers: Class names of the conflicting parsers.
    """

    def __init__(self, namespace: str, parser1: str, parser2: str) -> None:
        self.namespace = namespace
        self.parsers = [parser1, parser2]
        super().__init__(
            f"Namespace conflict: '{namespace}' handled by both:\n"
            f"  1. {parser1}\n"
            f"  2. {parser2}\n"
            "Register only one parser per namespace."
        )
