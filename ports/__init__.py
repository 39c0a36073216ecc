from .session import SessionProviderPort
from .sink import ResultSinkPort
from .source import IdentitySourcePort

__all__ = [
    "SessionProviderPort",
    "ResultSinkPort",
    "IdentitySourcePort",
]
