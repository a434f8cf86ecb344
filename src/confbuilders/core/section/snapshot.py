# src/confbuilders/core/section/snapshot.py
"""
Leitura por snapshot da coleção de endpoints.

A coleção viva pode ser mutada por outros caminhos de código enquanto é
lida. Toda passagem de leitura do core começa materializando uma cópia
ordenada e imutável; a iteração acontece sempre sobre essa cópia.

Invariantes:
    - O snapshot reflete o conteúdo no momento da chamada
    - Mutações posteriores da coleção não afetam o snapshot
    - Coleção vazia produz tupla vazia
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .collection import EndpointCollection
from .record import EndpointRecord


def take_snapshot(collection: EndpointCollection) -> Tuple[EndpointRecord, ...]:
    buffer: List[Optional[EndpointRecord]] = [None] * collection.count
    collection.copy_to(buffer, 0)
    # a coleção pode ter encolhido entre `count` e `copy_to`
    return tuple(record for record in buffer if record is not None)
