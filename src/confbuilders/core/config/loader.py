"""
Loader canônico de configuração do confbuilders.

Este módulo é responsável por carregar e resolver a configuração efetiva
utilizada pelo builder de pares chave/valor, e por extrair da árvore de
configuração a seção de endpoints que será reconciliada.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Estrutura esperada (v1):

    builder:
      mode: strict          # strict | greedy
      prefix: ""
      strip_prefix: false
    client:
      endpoints:
        - name: Orders
          address: http://orders.internal/svc
          binding: basicHttpBinding

Invariantes:
    - O arquivo de defaults é obrigatório
    - O resultado de `load_config` é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não produz pares chave/valor
    - Não mantém cache de configuração
    - Não valida seções não relacionadas a endpoints
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from ..errors import builder_configuration_error
from ..exceptions import BuilderConfigurationError
from ..section.collection import EndpointCollection
from .merge import deep_merge
from .errors import (
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


BUILDER_MODES = ("strict", "greedy")

_BUILDER_DEFAULTS: Dict[str, Any] = {
    "mode": "strict",
    "prefix": "",
    "strip_prefix": False,
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional e ignorado se não existir
        - Quando presente, o local sempre tem prioridade sobre defaults

    Args:
        defaults_path (str): Caminho para o arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    defaults = _load_file(Path(defaults_path))

    effective = defaults

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _load_file(local_file)
            effective = deep_merge(defaults, local)

    return effective


def builder_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extrai e valida o bloco `builder` de uma configuração resolvida.

    Chaves ausentes recebem os defaults (`mode="strict"`, `prefix=""`,
    `strip_prefix=False`). Chaves desconhecidas são preservadas no retorno,
    mas não interpretadas.

    Raises:
        BuilderConfigurationError: Se o bloco ou algum valor tiver tipo
            inválido, ou se `mode` não for suportado.
    """
    block = config.get("builder") or {}
    if not isinstance(block, dict):
        payload = builder_configuration_error(
            message="Bloco `builder` deve ser um mapeamento",
            details={"received": type(block).__name__},
        )
        raise BuilderConfigurationError(payload.message, payload.details, payload.hint)

    try:
        settings = deep_merge(_BUILDER_DEFAULTS, block)
    except ConfigTypeConflictError as exc:
        payload = builder_configuration_error(details={"reason": str(exc)})
        raise BuilderConfigurationError(payload.message, payload.details, payload.hint) from exc

    if settings["mode"] not in BUILDER_MODES:
        payload = builder_configuration_error(
            message=f"Modo de builder não suportado: {settings['mode']!r}",
            details={"mode": settings["mode"], "allowed": list(BUILDER_MODES)},
        )
        raise BuilderConfigurationError(payload.message, payload.details, payload.hint)

    return settings


def load_section(config: Dict[str, Any]) -> EndpointCollection:
    """
    Constrói a coleção de endpoints a partir de `client.endpoints`.

    Seção ausente produz coleção vazia.

    Raises:
        InvalidConfigRootTypeError: Se `client` não for mapeamento ou
            `client.endpoints` não for lista de mapeamentos, ou se algum
            registro não tiver `name` string não vazio e `address` string.
    """
    client = config.get("client") or {}
    if not isinstance(client, dict):
        raise InvalidConfigRootTypeError(
            f"Seção client deve ser dict, recebido: {type(client).__name__}"
        )

    endpoints = client.get("endpoints") or []
    if not isinstance(endpoints, list) or not all(isinstance(e, dict) for e in endpoints):
        raise InvalidConfigRootTypeError(
            "Seção client.endpoints deve ser uma lista de mapeamentos"
        )

    for position, item in enumerate(endpoints):
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidConfigRootTypeError(
                f"client.endpoints[{position}].name deve ser string não vazia, "
                f"recebido: {name!r}"
            )
        if not isinstance(item.get("address"), str):
            raise InvalidConfigRootTypeError(
                f"client.endpoints[{position}].address deve ser string, "
                f"recebido: {item.get('address')!r}"
            )

    return EndpointCollection.from_list(endpoints)
