# src/confbuilders/core/config/errors.py
"""
Exceções canônicas da camada de configuração do confbuilders.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e resolução da configuração do
builder e da árvore de configuração que contém as seções de endpoints.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de reconciliação de registros

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de handlers de seção ou do builder
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do confbuilders.

    Todas as exceções levantadas durante carregamento, validação estrutural
    e resolução de configuração devem herdar desta classe.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando uma estrutura da configuração não possui
    o tipo esperado.

    Casos cobertos:
        - conteúdo raiz do arquivo não é um dicionário (`dict`)
        - seção de endpoints não é uma lista de mapeamentos

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"builder": {"strip_prefix": false}}
        - override: {"builder": "greedy"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
