# tests/conftest.py
"""
Fixtures compartilhados para testes do confbuilders.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos de configuração (defaults/local) semelhantes ao uso real
- seções de endpoints pequenas e determinísticas
- handlers já ligados a uma coleção

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O (arquivos são escritos pelos testes via tmp_path)
    - Cada fixture retorna objetos novos, isolados entre testes
"""

import pytest


# =====================================================
# Config Loader fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults com bloco `builder` e seção `client.endpoints`.
    """
    return """
builder:
  mode: strict
  prefix: ""
  strip_prefix: false

client:
  endpoints:
    - name: Orders
      address: http://orders.internal/svc
      binding: basicHttpBinding
      contract: IOrders
    - name: Billing
      address: net.tcp://billing.internal:808/svc
      binding: netTcpBinding
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML local que troca o modo do builder e define um prefixo.
    """
    return """
builder:
  mode: greedy
  prefix: "Endpoint:"
  strip_prefix: true
"""


# =====================================================
# Section fixtures
# =====================================================

@pytest.fixture
def endpoint_items():
    """Registros crus da seção, no formato da árvore de configuração."""
    return [
        {
            "name": "Orders",
            "address": "http://orders.internal/svc",
            "binding": "basicHttpBinding",
            "contract": "IOrders",
        },
        {
            "name": "Billing",
            "address": "net.tcp://billing.internal:808/svc",
            "binding": "netTcpBinding",
        },
    ]


@pytest.fixture
def endpoints(endpoint_items):
    from confbuilders.core.section.collection import EndpointCollection

    return EndpointCollection.from_list(endpoint_items)


@pytest.fixture
def handler(endpoints):
    from confbuilders.core.section.handler import EndpointsSectionHandler

    return EndpointsSectionHandler("client.endpoints", endpoints)


@pytest.fixture
def empty_handler():
    from confbuilders.core.section.handler import EndpointsSectionHandler

    return EndpointsSectionHandler()
