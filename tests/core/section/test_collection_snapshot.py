# tests/core/section/test_collection_snapshot.py
"""
Testes da coleção viva de endpoints e da leitura por snapshot.

Os testes asseguram que:
- `add`/`remove` operam por identidade e preservam ordem
- o snapshot é materializado e desacoplado de mutações posteriores
- enumerar enquanto outra thread muta a coleção não falha nem produz
  entradas duplicadas

Limites explícitos:
    - Não valida a reconciliação (ver test_insert_or_update.py)
"""

import threading

import pytest

try:
    from confbuilders.core.section.collection import EndpointCollection
    from confbuilders.core.section.record import EndpointRecord
    from confbuilders.core.section.snapshot import take_snapshot
except Exception as e:  # noqa: BLE001
    EndpointCollection = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing section collection. Implement:\n"
            "- src/confbuilders/core/section/collection.py (EndpointCollection)\n"
            "- src/confbuilders/core/section/snapshot.py (take_snapshot)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_empty_collection_snapshot_is_empty():
    _require_imports()
    assert take_snapshot(EndpointCollection()) == ()


def test_remove_is_by_identity(endpoints):
    """
    Verifica que `remove` não remove um registro apenas por ter o mesmo conteúdo.
    """
    _require_imports()
    lookalike = EndpointRecord(name="Orders", address="http://orders.internal/svc")
    assert endpoints.remove(lookalike) is False
    assert endpoints.count == 2

    first = take_snapshot(endpoints)[0]
    assert endpoints.remove(first) is True
    assert [r.name for r in take_snapshot(endpoints)] == ["Billing"]


def test_remove_by_name_is_case_sensitive(endpoints):
    _require_imports()
    assert endpoints.remove_by_name("orders") is False
    assert endpoints.remove_by_name("Orders") is True
    assert len(endpoints) == 1


def test_add_rejects_foreign_objects():
    _require_imports()
    with pytest.raises(TypeError):
        EndpointCollection().add({"name": "Orders", "address": "http://o/"})


def test_copy_to_appends_when_target_is_short(endpoints):
    _require_imports()
    target = [None]
    endpoints.copy_to(target, 0)
    assert [r.name for r in target] == ["Orders", "Billing"]


def test_snapshot_is_decoupled_from_later_mutation(endpoints):
    """
    Verifica que o snapshot não acompanha mutações da coleção viva.

    Invariantes:
        - O snapshot é uma tupla (imutável)
        - Inserções e remoções posteriores não aparecem no snapshot
    """
    _require_imports()
    snapshot = take_snapshot(endpoints)
    endpoints.add(EndpointRecord(name="Audit", address="http://audit/"))
    endpoints.remove(snapshot[0])

    assert isinstance(snapshot, tuple)
    assert [r.name for r in snapshot] == ["Orders", "Billing"]
    assert [r.name for r in take_snapshot(endpoints)] == ["Billing", "Audit"]


def test_enumeration_during_concurrent_mutation(handler):
    """
    Verifica que enumerar durante mutações concorrentes é seguro.

    Uma thread escritora insere e remove registros continuamente enquanto
    a thread principal enumera o handler repetidas vezes.

    Invariantes:
        - Nenhuma exceção é levantada durante a enumeração
        - Cada enumeração não contém o mesmo registro duas vezes
        - Os registros iniciais, nunca removidos, aparecem sempre
    """
    _require_imports()
    stop = threading.Event()
    errors = []

    def writer():
        i = 0
        try:
            while not stop.is_set():
                record = EndpointRecord(name=f"tmp-{i}", address="http://tmp/")
                handler.endpoints.add(record)
                handler.endpoints.remove(record)
                i += 1
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)

    thread = threading.Thread(target=writer)
    thread.start()
    try:
        for _ in range(500):
            pairs = list(handler)
            ids = [id(record) for _, record in pairs]
            assert len(ids) == len(set(ids))
            names = [name for name, _ in pairs]
            assert "Orders" in names
            assert "Billing" in names
    finally:
        stop.set()
        thread.join()

    assert errors == []
