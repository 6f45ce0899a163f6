from providers.base import StatusProvider
from providers.dtek_provider import DtekProvider

__all__ = ["StatusProvider", "DtekProvider"]
