# src/confbuilders/core/builder.py
"""
Aplicação de pares chave/valor sobre um handler de seção.

Este módulo define `apply_key_values`, o driver que consome pares
chave/valor já produzidos por uma fonte externa e os aplica a uma seção
através do contrato `SectionHandler`.

Modos suportados (v1):
    - strict → atualiza apenas nomes já existentes na seção; nenhum
      registro novo é criado
    - greedy → aplica todos os pares, inserindo os nomes ausentes; a
      grafia gravada só é reaproveitada quando a chave casa exatamente
      (sensível a caixa) com um nome existente, então "orders" ao lado de
      "Orders" gera um segundo registro

Filtragem por prefixo:
    - chaves que não começam com `prefix` (comparação sem caixa) são ignoradas
    - com `strip_prefix=True`, o prefixo é removido antes da aplicação

Decisões arquiteturais:
    - Falhas de endereço propagam imediatamente; pares anteriores
      permanecem aplicados (sem rollback entre pares)
    - O hash da seção antes/depois é registrado para rastreabilidade

Limites explícitos:
    - Não produz pares chave/valor
    - Não persiste a configuração resultante
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .config.hashing import compute_config_hash
from .config.loader import BUILDER_MODES
from .errors import builder_configuration_error
from .exceptions import BuilderConfigurationError
from .section.handler import EndpointsSectionHandler, SectionHandler


@dataclass(frozen=True)
class ApplyReport:
    """Resultado imutável de uma aplicação de pares chave/valor."""

    mode: str
    applied: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    section_hash_before: Optional[str] = None
    section_hash_after: Optional[str] = None


def _section_hash(handler: SectionHandler) -> Optional[str]:
    if not isinstance(handler, EndpointsSectionHandler):
        return None
    return compute_config_hash({"endpoints": handler.endpoints.to_list()})


def _filter_pairs(
    pairs: Mapping[str, Optional[str]],
    prefix: str,
    strip_prefix: bool,
    skipped: List[str],
) -> Dict[str, Optional[str]]:
    selected: Dict[str, Optional[str]] = {}
    lowered = prefix.lower()
    for key, value in pairs.items():
        if not key.lower().startswith(lowered):
            skipped.append(key)
            continue
        name = key[len(prefix):] if strip_prefix else key
        if not name:
            skipped.append(key)
            continue
        selected[name] = value
    return selected


def apply_key_values(
    handler: SectionHandler,
    pairs: Mapping[str, Optional[str]],
    *,
    mode: str = "strict",
    prefix: str = "",
    strip_prefix: bool = False,
) -> ApplyReport:
    """
    Aplica `pairs` à seção ligada a `handler`.

    Args:
        handler: Handler da seção alvo.
        pairs: Mapeamento chave → valor. Valores `None` são ignorados.
        mode: `"strict"` ou `"greedy"`.
        prefix: Prefixo exigido nas chaves.
        strip_prefix: Remove o prefixo antes de aplicar.

    Returns:
        ApplyReport: chaves aplicadas, chaves ignoradas e hashes da seção.

    Raises:
        BuilderConfigurationError: Se `mode` não for suportado.
        InvalidAddressError: Se algum valor não for URI absoluta.
    """
    if mode not in BUILDER_MODES:
        payload = builder_configuration_error(
            message=f"Modo de builder não suportado: {mode!r}",
            details={"mode": mode, "allowed": list(BUILDER_MODES)},
        )
        raise BuilderConfigurationError(payload.message, payload.details, payload.hint)

    applied: List[str] = []
    skipped: List[str] = []
    hash_before = _section_hash(handler)

    selected = _filter_pairs(pairs, prefix, strip_prefix, skipped)

    if mode == "strict":
        by_lower = {key.lower(): key for key in selected}
        matched = set()
        for name, record in handler:
            key = by_lower.get(name.lower())
            if key is None:
                continue
            matched.add(key)
            value = selected[key]
            if value is None:
                skipped.append(key)
                continue
            handler.insert_or_update(name, value, old_key=name, old_item=record)
            applied.append(name)
        skipped.extend(key for key in selected if key not in matched)

    else:
        for key, value in selected.items():
            if value is None:
                skipped.append(key)
                continue
            name = handler.try_get_original_case(key)
            handler.insert_or_update(name, value, old_key=name)
            applied.append(name)

    return ApplyReport(
        mode=mode,
        applied=applied,
        skipped=skipped,
        section_hash_before=hash_before,
        section_hash_after=_section_hash(handler),
    )
