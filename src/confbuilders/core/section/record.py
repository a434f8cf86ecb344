# src/confbuilders/core/section/record.py
"""
Registro canônico de endpoint e validação de endereço.

Um `EndpointRecord` representa uma entrada nomeada da seção
`client.endpoints`: possui um `name` (chave lógica, sensível a caixa),
um `address` (URI absoluta) e um conjunto opaco de campos adicionais
(`binding`, `contract`, `behaviorConfiguration`, ...) que o core nunca
interpreta e sempre preserva.

Invariantes:
    - `extra` nunca contém as chaves `name` ou `address`
    - `address` atribuído pela reconciliação é sempre uma URI absoluta
    - A identidade de um registro é a referência do objeto

Limites explícitos:
    - Não garante unicidade de nomes (responsabilidade da coleção/handler)
    - Não valida campos adicionais
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict
from urllib.parse import urlsplit

from ..exceptions import InvalidAddressError


_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

# espaços e caracteres de controle não são válidos em nenhuma parte da URI
_INVALID_CHARS_RE = re.compile(r"[\s\x00-\x1f\x7f]")

_MANAGED_FIELDS = ("name", "address")


def parse_address(value: Any) -> str:
    """
    Valida e normaliza um endereço de endpoint.

    Aceita apenas URIs absolutas: esquema RFC 3986 seguido de `:` e de um
    restante não vazio, sem espaços ou caracteres de controle internos.
    Espaços nas extremidades são removidos. Com autoridade (`//`), o host
    é obrigatório, exceto para `file:`.

    Raises:
        InvalidAddressError: Se o valor não for string ou não for uma URI
            absoluta válida.
    """
    if not isinstance(value, str):
        raise InvalidAddressError(
            f"Endereço deve ser string, recebido: {type(value).__name__}",
            details={"value": repr(value)},
            hint="Informe o endereço como texto na fonte de configuração.",
        )

    text = value.strip()
    match = _SCHEME_RE.match(text)
    if match is None or len(text) == match.end() or _INVALID_CHARS_RE.search(text):
        raise InvalidAddressError(
            f"URI absoluta inválida: {value!r}",
            details={"value": value},
            hint="Inclua o esquema (ex.: http://, net.tcp://) no endereço.",
        )

    try:
        parts = urlsplit(text)
        # porta fora do intervalo só é detectada no acesso
        _ = parts.port
    except ValueError as exc:
        raise InvalidAddressError(
            f"URI absoluta inválida: {value!r}",
            details={"value": value, "reason": str(exc)},
            hint="Revise host e porta do endereço.",
        ) from exc

    has_authority = text[len(parts.scheme) + 1:].startswith("//")
    if has_authority and not parts.hostname and parts.scheme != "file":
        raise InvalidAddressError(
            f"URI sem host: {value!r}",
            details={"value": value},
            hint="Informe o host após `//` no endereço.",
        )

    return text


@dataclass(eq=False)
class EndpointRecord:
    """
    Entrada da seção de endpoints.

    `eq=False` mantém a igualdade por identidade: dois registros com o
    mesmo conteúdo continuam sendo objetos distintos para `remove`.
    """

    name: str
    address: str
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EndpointRecord":
        extra = {k: v for k, v in data.items() if k not in _MANAGED_FIELDS}
        return cls(
            name=data.get("name"),
            address=data.get("address"),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "address": self.address}
        out.update(self.extra)
        return out
