# src/clean_config/hashing.py
"""
Hashing canônico do documento de configuração.

O fingerprint identifica estruturalmente o documento mesclado mantido
pelo `ConfigStore`, permitindo comparar estados em logs e testes
(ex.: verificar que um `add` que falhou não alterou nada).

Política de hashing:
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256

Limites explícitos:
    - Não persiste o hash
    - Valores não serializáveis em JSON (datas do YAML, por exemplo)
      são representados via `str`
    - Chaves que não são `str` (bool, int, None do YAML) são representadas
      como `"<tipo>:<repr>"` antes da ordenação
"""

import json
import hashlib
from collections.abc import Mapping
from typing import Dict, Any


def _normalize_keys(value: Any) -> Any:
    # YAML aceita chaves bool/int/None; JSON ordenado exige chaves str
    if isinstance(value, Mapping):
        return {
            key if isinstance(key, str) else f"{type(key).__name__}:{key!r}": _normalize_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_normalize_keys(item) for item in value]
    return value


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de um documento de configuração.

    Args:
        config (Dict[str, Any]): Documento de configuração.

    Returns:
        str: Hash SHA-256 hexadecimal (64 caracteres).

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        _normalize_keys(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
