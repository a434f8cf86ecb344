# src/confbuilders/core/section/collection.py
"""
Coleção ordenada de endpoints pertencente à árvore de configuração.

A `EndpointCollection` é o contêiner vivo da seção `client.endpoints`.
Ela pertence ao dono da configuração, não ao handler: o handler apenas
lê (via cópia) e muta (via `add`/`remove`) a coleção.

Decisões arquiteturais:
    - Cada operação individual é protegida por um `RLock` do dono
    - Não existe iteração direta sobre a estrutura interna; leitores
      devem copiar (`copy_to`) antes de iterar
    - `remove` opera por identidade de referência

Limites explícitos:
    - Não garante atomicidade de sequências de operações
    - Não impõe unicidade de nomes
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, MutableSequence, Optional

from .record import EndpointRecord


@dataclass(eq=False)
class EndpointCollection:
    """Contêiner mutável e ordenado de `EndpointRecord`."""

    _items: List[EndpointRecord] = field(default_factory=list, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    @classmethod
    def from_list(cls, items: Iterable[Dict[str, Any]]) -> "EndpointCollection":
        return cls([EndpointRecord.from_dict(item) for item in items])

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.count

    def copy_to(self, target: MutableSequence[Optional[EndpointRecord]], index: int = 0) -> None:
        """
        Copia os registros para `target` a partir de `index`.

        `target` deve ter tamanho suficiente; se a coleção cresceu desde
        que o chamador dimensionou o destino, os registros excedentes são
        anexados ao final.
        """
        with self._lock:
            for offset, record in enumerate(self._items):
                position = index + offset
                if position < len(target):
                    target[position] = record
                else:
                    target.append(record)

    def add(self, record: EndpointRecord) -> None:
        if not isinstance(record, EndpointRecord):
            raise TypeError(
                f"EndpointCollection aceita apenas EndpointRecord, recebido: {type(record).__name__}"
            )
        with self._lock:
            self._items.append(record)

    def remove(self, record: EndpointRecord) -> bool:
        """Remove `record` por identidade. Retorna False se não estiver presente."""
        with self._lock:
            for position, item in enumerate(self._items):
                if item is record:
                    del self._items[position]
                    return True
        return False

    def remove_by_name(self, name: str) -> bool:
        """Remove o primeiro registro com `name` exatamente igual."""
        with self._lock:
            for position, item in enumerate(self._items):
                if item.name == name:
                    del self._items[position]
                    return True
        return False

    def to_list(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [record.to_dict() for record in self._items]
