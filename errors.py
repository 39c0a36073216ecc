from __future__ import annotations


class EnrichmentError(Exception):
    """Base class for every error raised while enriching one identity record."""


class FatalError(EnrichmentError, RuntimeError):
    """Terminates the run with a non-zero exit code."""


class ConfigurationError(FatalError):
    pass


class SourceReadError(FatalError):
    pass


class SessionError(FatalError):
    pass


class ResolutionMiss(EnrichmentError):
    """No rendered search result matched the target name or profile URL shape."""


class ExtractionMiss(EnrichmentError):
    """A field probe found nothing usable. Never escapes services.extraction.attempt."""

    def __init__(self, field: str, reason: str = "not found") -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class NavigationError(EnrichmentError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"navigation to {url} failed: {reason}")
        self.url = url
        self.reason = reason
