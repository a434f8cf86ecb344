"""
confbuilders — reconciliação de seções de configuração a partir de pares chave/valor.

Este pacote raiz define o namespace público do confbuilders, uma camada
que permite a uma fonte externa de pares chave/valor sobrescrever ou
complementar a seção de endpoints de uma árvore de configuração, sem
perder campos adicionais dos registros existentes.

Arquitetura em alto nível:
    - core.section → registros, coleção viva, snapshot e handlers de seção
    - core.builder → aplicação de pares chave/valor (strict | greedy)
    - core.config  → carregamento, merge e hashing de configuração
    - core.errors  → payloads canônicos de erro

Limites explícitos:
    - Não produz pares chave/valor (variáveis de ambiente, cofres, etc.)
    - Não persiste a configuração resultante
"""
# src/confbuilders/__init__.py
from .core.builder import ApplyReport, apply_key_values
from .core.section import (
    EndpointCollection,
    EndpointRecord,
    EndpointsSectionHandler,
    SectionHandler,
    UpdateRequest,
)

__all__ = [
    "ApplyReport",
    "EndpointCollection",
    "EndpointRecord",
    "EndpointsSectionHandler",
    "SectionHandler",
    "UpdateRequest",
    "apply_key_values",
]
