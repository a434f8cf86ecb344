# src/confbuilders/core/section/__init__.py
"""
Seções de configuração reconciliáveis por pares chave/valor.

Componentes:
    - record     → EndpointRecord e validação de endereço (parse_address)
    - collection → EndpointCollection, o contêiner vivo da seção
    - snapshot   → cópia materializada antes de qualquer iteração
    - handler    → SectionHandler e EndpointsSectionHandler
"""

from .collection import EndpointCollection
from .handler import EndpointsSectionHandler, SectionHandler, UpdateRequest
from .record import EndpointRecord, parse_address
from .snapshot import take_snapshot

__all__ = [
    "EndpointCollection",
    "EndpointRecord",
    "EndpointsSectionHandler",
    "SectionHandler",
    "UpdateRequest",
    "parse_address",
    "take_snapshot",
]
