# src/clean_config/accessor.py
"""
Leitura estrita de configuração por chave pontilhada.

`resolve_key_path(root, "a.b.c")` percorre a view segmento a segmento e
falha com `MissingKeyError` no primeiro segmento sem valor definido,
informando o prefixo consumido até ali (ex.: "a.x").

Um segmento é considerado sem valor quando a chave não existe, quando o
valor é `None` (YAML `null`/`~`) ou quando é `False`. Descer por um valor
que não é mapping (lista ou escalar) torna o próximo segmento ausente.
"""

from typing import Any, Optional

from .errors import InvalidKeyPathError, MissingKeyError
from .view import ConfigView


def _member(node: Any, name: str) -> Any:
    if isinstance(node, ConfigView):
        return node.get(name)
    return None


def resolve_key_path(root: Optional[ConfigView], key_path: Optional[str]) -> Any:
    """
    Resolve uma chave pontilhada contra a view, de forma estrita.

    Args:
        root: View raiz do documento (`None` quando nada foi carregado).
        key_path: Chaves aninhadas separadas por ponto.

    Returns:
        Any: O nó final (view aninhada, lista ou escalar).

    Raises:
        InvalidKeyPathError: Se `key_path` for vazio ou `None`.
        MissingKeyError: Se algum segmento não tiver valor definido.
    """
    if not key_path:
        raise InvalidKeyPathError("config_key required")

    node: Any = root
    consumed = []
    for segment in key_path.split("."):
        consumed.append(segment)
        node = _member(node, segment)
        if node is None or node is False:
            raise MissingKeyError(".".join(consumed))

    return node
