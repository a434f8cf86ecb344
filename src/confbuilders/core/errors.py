"""
confbuilders — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do confbuilders.
Erros são considerados artefatos de domínio e fazem parte do contrato operacional
do sistema, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma correção silenciosa é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .exceptions import (
    BuilderConfigurationError,
    ConfBuildersException,
    InvalidAddressError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do confbuilders.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Seções / Registros
INVALID_ADDRESS = "INVALID_ADDRESS"

# Builder / Configuração
BUILDER_CONFIGURATION_ERROR = "BUILDER_CONFIGURATION_ERROR"

# Fallback para exceções tipadas sem entrada no catálogo
INTERNAL_ERROR = "INTERNAL_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def invalid_address(
    *,
    value: Any,
    key: Optional[str] = None,
    section: Optional[str] = None,
    hint: str = "Informe uma URI absoluta (ex.: http://host:porta/caminho) na fonte de configuração.",
) -> ErrorPayload:
    return ErrorPayload(
        type=INVALID_ADDRESS,
        message="Endereço do endpoint não é uma URI válida",
        details={
            "value": value,
            "key": key,
            "section": section,
        },
        hint=hint,
    )


def builder_configuration_error(
    *,
    message: str = "Configuração inválida para aplicação de pares chave/valor",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise o bloco `builder` da configuração (mode, prefix, strip_prefix).",
) -> ErrorPayload:
    return ErrorPayload(
        type=BUILDER_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
    )


_TYPE_BY_EXCEPTION: List[tuple] = [
    (InvalidAddressError, INVALID_ADDRESS),
    (BuilderConfigurationError, BUILDER_CONFIGURATION_ERROR),
]


def payload_from_exception(exc: ConfBuildersException) -> ErrorPayload:
    """
    Converte uma exceção tipada do confbuilders em payload canônico.

    O mapeamento é determinístico: a primeira classe do catálogo
    compatível com a exceção define o `type`. Exceções tipadas sem
    entrada no catálogo são mapeadas para `INTERNAL_ERROR`.
    """
    error_type = INTERNAL_ERROR
    for exc_cls, mapped in _TYPE_BY_EXCEPTION:
        if isinstance(exc, exc_cls):
            error_type = mapped
            break

    return ErrorPayload(
        type=error_type,
        message=exc.message,
        details=dict(exc.details),
        hint=exc.hint,
    )
