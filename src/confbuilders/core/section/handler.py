# src/confbuilders/core/section/handler.py
"""
Handlers de seção: aplicação de pares chave/valor sobre seções de configuração.

Este módulo define o contrato `SectionHandler` e sua implementação para a
seção `client.endpoints`, o `EndpointsSectionHandler`.

O handler de endpoints é responsável por:
    - enumerar os registros existentes como pares (nome, registro)
    - recuperar a grafia original de um nome já presente na seção
    - inserir, atualizar ou renomear um registro a partir de um par
      chave/valor, preservando campos adicionais do registro

Decisões arquiteturais:
    - Toda leitura parte de um snapshot (`take_snapshot`), nunca da
      coleção viva
    - O endereço é validado antes de qualquer remoção: um valor inválido
      não deixa a seção parcialmente atualizada
    - A referência explícita (`old_item`) tem prioridade sobre o registro
      localizado por `old_key`, preservando seus campos adicionais
    - Eventos estruturados são registrados em `events`, no mesmo formato
      do restante do projeto

Invariantes:
    - Após `insert_or_update`, existe no máximo um registro por nome
    - `new_value=None` nunca altera a coleção

Limites explícitos:
    - O handler não adquire locks: chamadas concorrentes de
      `insert_or_update` sobre a mesma coleção devem ser serializadas
      pelo chamador
    - Não produz pares chave/valor nem persiste a configuração
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..errors import invalid_address
from ..exceptions import InvalidAddressError
from .collection import EndpointCollection
from .record import EndpointRecord, parse_address
from .snapshot import take_snapshot


@dataclass(frozen=True)
class UpdateRequest:
    """Par chave/valor a aplicar, com a origem opcional do registro antigo."""

    new_key: str
    new_value: Optional[str]
    old_key: Optional[str] = None
    old_item: Optional[EndpointRecord] = None


class SectionHandler(ABC):
    """
    Contrato base de um handler ligado a uma seção de configuração.

    Subclasses definem como enumerar a seção e como aplicar um par
    chave/valor. A recuperação de grafia original tem implementação
    padrão: devolve a chave como recebida.
    """

    def __init__(self, name: str = "", section: Any = None) -> None:
        self.name = name
        self.section = section

    def initialize(self, name: str, section: Any) -> None:
        self.name = name
        self.section = section

    @abstractmethod
    def insert_or_update(
        self,
        new_key: str,
        new_value: Optional[str],
        old_key: Optional[str] = None,
        old_item: Any = None,
    ) -> None:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        ...

    def try_get_original_case(self, requested_key: Optional[str]) -> Optional[str]:
        return requested_key

    def apply(self, request: UpdateRequest) -> None:
        self.insert_or_update(
            request.new_key,
            request.new_value,
            old_key=request.old_key,
            old_item=request.old_item,
        )


class EndpointsSectionHandler(SectionHandler):
    """
    Handler da seção `client.endpoints`.

    Exemplo:
        handler = EndpointsSectionHandler("client.endpoints", collection)
        for name, record in handler:
            ...
        handler.insert_or_update("Orders", "http://orders.internal/v2", old_key="Orders")
    """

    def __init__(
        self,
        name: str = "client.endpoints",
        section: Optional[EndpointCollection] = None,
    ) -> None:
        super().__init__(name, section if section is not None else EndpointCollection())
        self.events: List[Dict[str, Any]] = []

    @property
    def endpoints(self) -> EndpointCollection:
        return self.section

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, operation: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "section": self.name,
            "operation": operation,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def clear_events(self) -> None:
        self.events.clear()

    # -----------------------------
    # Leitura
    # -----------------------------
    def __iter__(self) -> Iterator[Tuple[str, EndpointRecord]]:
        # a coleção pode mudar durante a enumeração
        for record in take_snapshot(self.endpoints):
            yield record.name, record

    def items(self) -> Iterator[Tuple[str, EndpointRecord]]:
        return iter(self)

    def try_get_original_case(self, requested_key: Optional[str]) -> Optional[str]:
        """
        Recupera a grafia original de um nome já presente na seção.

        Usado em merges gulosos para preservar a caixa gravada na
        configuração em vez da caixa usada pela fonte de pares.

        A comparação é por igualdade exata (sensível a caixa). Entradas
        vazias ou só com espaços retornam o fallback sem consultar a seção.
        """
        if requested_key is not None and requested_key.strip():
            for record in take_snapshot(self.endpoints):
                if record.name == requested_key:
                    return record.name

        return super().try_get_original_case(requested_key)

    # -----------------------------
    # Reconciliação
    # -----------------------------
    def insert_or_update(
        self,
        new_key: str,
        new_value: Optional[str],
        old_key: Optional[str] = None,
        old_item: Optional[EndpointRecord] = None,
    ) -> None:
        """
        Aplica um par chave/valor à seção.

        Args:
            new_key: Nome final do registro.
            new_value: Endereço do registro. `None` significa "nada a
                aplicar" e não altera a seção.
            old_key: Nome anterior do registro, se conhecido.
            old_item: Referência ao registro obtido na enumeração. Tem
                prioridade sobre o registro encontrado por `old_key`.

        Raises:
            ValueError: Se `new_key` for vazio.
            TypeError: Se `old_item` não for `EndpointRecord`.
            InvalidAddressError: Se `new_value` não for URI absoluta; a
                seção permanece inalterada.
        """
        if new_value is None:
            self.log(
                operation="insert_or_update",
                level="DEBUG",
                message="skipped",
                key=new_key,
            )
            return

        if not isinstance(new_key, str) or not new_key:
            raise ValueError("new_key must be a non-empty string")

        if old_item is not None and not isinstance(old_item, EndpointRecord):
            raise TypeError(
                f"old_item deve ser EndpointRecord, recebido: {type(old_item).__name__}"
            )

        try:
            address = parse_address(new_value)
        except InvalidAddressError:
            payload = invalid_address(value=new_value, key=new_key, section=self.name)
            self.log(
                operation="insert_or_update",
                level="ERROR",
                message="invalid_address",
                key=new_key,
                error=payload.to_dict(),
            )
            raise

        endpoints = take_snapshot(self.endpoints)

        old_key_endpoint = None
        if old_key is not None:
            old_key_endpoint = next((e for e in endpoints if e.name == old_key), None)

        # preserva campos adicionais do registro já conhecido pelo chamador
        target = old_item if old_item is not None else old_key_endpoint
        inserted = target is None
        if target is None:
            target = EndpointRecord(name=new_key, address=address)

        new_key_endpoint = next((e for e in endpoints if e.name == new_key), None)

        removed: List[str] = []
        if old_key_endpoint is not None:
            self.endpoints.remove(old_key_endpoint)
            removed.append(old_key_endpoint.name)

        if old_key != new_key and new_key_endpoint is not None:
            self.endpoints.remove(new_key_endpoint)
            removed.append(new_key_endpoint.name)

        if not inserted:
            # `old_item` ainda presente sob outro nome não pode ser duplicado
            self.endpoints.remove(target)

        previous_name = target.name
        target.name = new_key
        target.address = address
        self.endpoints.add(target)

        if inserted:
            message = "inserted"
        elif previous_name != new_key or new_key_endpoint not in (None, target):
            message = "renamed"
        else:
            message = "updated"

        self.log(
            operation="insert_or_update",
            level="INFO",
            message=message,
            key=new_key,
            old_key=old_key,
            removed=removed,
        )
