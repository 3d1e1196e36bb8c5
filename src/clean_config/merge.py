# src/clean_config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política de deep-merge utilizada pelo
`ConfigStore` para combinar o documento já carregado com um novo
documento (arquivo adicional ou dados em tempo de execução).

Política de merge:
    - mapping + mapping → merge recursivo por chave
    - qualquer outro caso → sobrescrita total pelo valor recebido
      (listas incluídas, sem merge elemento a elemento)

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - Não existem heurísticas implícitas ou mágicas

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves presentes apenas na base são preservadas
    - Aplicar o mesmo documento duas vezes equivale a aplicá-lo uma vez

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não realiza coerção de tipos
    - Não valida schema
"""

from copy import deepcopy
from collections.abc import Mapping
from typing import Any, Dict

from .errors import InvalidConfigError


def deep_merge(base: Mapping, incoming: Mapping) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois mapeamentos de configuração.

    Para cada chave de `incoming`: se o valor existente em `base` e o valor
    recebido forem ambos mapeamentos, eles são mesclados recursivamente;
    caso contrário o valor recebido substitui o da base.

    Decisões arquiteturais:
        - O merge é puramente funcional (inputs não são mutados)
        - Conflitos de tipo não são erro: o valor recebido sempre vence
        - Valores copiados são cópias profundas, sem aliasing com os inputs

    Args:
        base (Mapping): Documento atual.
        incoming (Mapping): Documento a ser aplicado sobre a base.

    Returns:
        Dict[str, Any]: Novo dicionário resultante do deep-merge.

    Raises:
        InvalidConfigError: Se algum dos lados não for um mapeamento na raiz.
    """

    if not isinstance(base, Mapping) or not isinstance(incoming, Mapping):
        raise InvalidConfigError(
            f"Deep-merge requer mappings no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(incoming).__name__}"
        )

    result: Dict[str, Any] = {key: deepcopy(value) for key, value in base.items()}

    for key, incoming_value in incoming.items():
        base_value = result.get(key)

        if isinstance(base_value, Mapping) and isinstance(incoming_value, Mapping):
            result[key] = deep_merge(base_value, incoming_value)
            continue

        result[key] = deepcopy(incoming_value)

    return result
