# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do confbuilders.

Este módulo garante que:
- o pytest consegue descobrir e executar testes
- o namespace público do pacote pode ser importado sem falhas estruturais

Limites explícitos:
    - Não testar lógica de reconciliação
    - Não acumular asserts funcionais
"""


def test_smoke():
    """
    Smoke test mínimo: o namespace público expõe a API esperada.
    """
    import confbuilders

    for name in confbuilders.__all__:
        assert hasattr(confbuilders, name)
