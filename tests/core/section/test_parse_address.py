# tests/core/section/test_parse_address.py
"""
Testes da validação de endereços de endpoint.

Os testes asseguram que apenas URIs absolutas são aceitas e que a
falha é reportada com `InvalidAddressError` carregando o valor recebido.
"""

import pytest

try:
    from confbuilders.core.section.record import EndpointRecord, parse_address
    from confbuilders.core.exceptions import InvalidAddressError
except Exception as e:  # noqa: BLE001
    parse_address = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing section record. Implement:\n"
            "- src/confbuilders/core/section/record.py (EndpointRecord, parse_address)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "value",
    [
        "http://h/",
        "https://orders.internal:8443/svc?x=1",
        "net.tcp://billing.internal:808/svc",
        "net.pipe://localhost/queue",
        "urn:uuid:6e8bc430-9c3a-11d9-9669-0800200c9a66",
        "file:///var/run/orders.sock",
    ],
)
def test_absolute_uris_are_accepted(value):
    _require_imports()
    assert parse_address(value) == value


def test_surrounding_whitespace_is_stripped():
    _require_imports()
    assert parse_address("  http://h/  ") == "http://h/"


@pytest.mark.parametrize(
    "value",
    [
        "",
        "   ",
        "orders.internal/svc",
        "/relative/path",
        "http:",
        "http://",
        "http://h:99999/",
        "http://h:port/",
        "http://[::1/",
        "1http://h/",
        "http://a b/",
        "http://host/\x00path",
        "http://ho st:80/x",
        "http:// /",
        "http://host/pa\tth",
        "http://user@/svc",
        "urn:has space",
    ],
)
def test_invalid_uris_raise(value):
    _require_imports()
    with pytest.raises(InvalidAddressError) as excinfo:
        parse_address(value)
    assert excinfo.value.details["value"] == value
    assert excinfo.value.hint


def test_non_string_raises():
    _require_imports()
    with pytest.raises(InvalidAddressError):
        parse_address(8080)


def test_record_dict_conversion_keeps_extra_fields():
    """
    Verifica que campos não gerenciados sobrevivem à conversão de/para dict.
    """
    _require_imports()
    data = {"name": "Orders", "address": "http://o/", "binding": "basicHttpBinding"}
    record = EndpointRecord.from_dict(data)
    assert record.extra == {"binding": "basicHttpBinding"}
    assert record.to_dict() == data


def test_records_compare_by_identity():
    _require_imports()
    a = EndpointRecord(name="Orders", address="http://o/")
    b = EndpointRecord(name="Orders", address="http://o/")
    assert a != b
    assert a == a
