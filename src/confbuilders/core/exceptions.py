"""
confbuilders — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do confbuilders.

Objetivo:
- Permitir que handlers e o builder levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Não contém lógica específica de uma seção de configuração.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ConfBuildersException(Exception):
    """Base class para exceções internas do confbuilders.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Seções / Registros
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InvalidAddressError(ConfBuildersException):
    """Valor recebido não é uma URI absoluta válida para o endereço do endpoint."""


# ---------------------------------------------------------------------------
# Builder / Configuração
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BuilderConfigurationError(ConfBuildersException):
    """Configuração inválida ou inconsistente para aplicação de pares chave/valor."""
