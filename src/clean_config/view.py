# src/clean_config/view.py
"""
Projeção dinâmica e somente leitura do documento de configuração.

A `ConfigView` embrulha recursivamente um documento já carregado e
oferece leitura leniente: acessar um membro inexistente devolve `None`
em vez de falhar. É a contraparte da leitura estrita de
`accessor.resolve_key_path`, que levanta erro no mesmo cenário.

Tipos de nó:
    - mapping   → `ConfigView`
    - sequência → nova lista com os elementos embrulhados recursivamente
    - escalar   → devolvido como está

Invariantes:
    - A view nunca muta o documento que embrulha
    - Escritas são rejeitadas; alterações passam por `ConfigStore.merge`

Limites explícitos:
    - Não copia o documento: o `ConfigStore` é dono exclusivo dele
    - Não valida schema nem converte tipos
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict, Iterator, List, Optional


def wrap(value: Any) -> Any:
    """Embrulha um valor do documento conforme o tipo do nó."""
    if isinstance(value, Mapping):
        return ConfigView(value)
    if isinstance(value, (list, tuple)):
        return [wrap(item) for item in value]
    return value


class ConfigView(Mapping):
    """
    Nó mapping somente leitura com acesso leniente por atributo.

    Exemplo:
        view = ConfigView({"database": {"host": "localhost"}})
        view.database.host        # "localhost"
        view.database.port        # None
        view.fetch("timeout", 30) # 30

    `view["chave"]` segue o contrato de `Mapping` e levanta `KeyError`
    quando a chave não existe.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping):
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: Any) -> Any:
        return wrap(self._data[key])

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        # dunders seguem o protocolo normal (copy, pickle, etc.)
        if name == "_data" or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError(f"{type(self).__name__} é somente leitura")

    def __delattr__(self, name: str) -> None:
        raise TypeError(f"{type(self).__name__} é somente leitura")

    def __dir__(self) -> List[str]:
        names = [key for key in self._data if isinstance(key, str)]
        return sorted(set(super().__dir__()) | set(names))

    def __reduce__(self):
        return (type(self), (self._data,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def keys(self) -> List[Any]:
        return list(self._data.keys())

    def get(self, name: Any, default: Optional[Any] = None) -> Any:
        if name not in self._data:
            return default
        return wrap(self._data[name])

    def fetch(self, key: Any, default: Optional[Any] = None) -> Any:
        """Valor em `key` ou `default` quando a chave não existe."""
        return self.get(key, default)

    def to_dict(self) -> Dict[Any, Any]:
        return deepcopy(dict(self._data))
