# src/clean_config/store.py
"""
Store de configuração do Clean Config.

O `ConfigStore` mantém o documento de configuração mesclado e a
`ConfigView` derivada dele. Existe uma instância por processo
(`ConfigStore.instance()`), mas o store também é construível
diretamente para uso isolado (testes, bibliotecas, injeção).

Ciclo de vida:
    - Vazio: nenhum documento carregado (`is_empty()` é True)
    - Carregado: após o primeiro `merge` bem-sucedido
    - Merges seguintes aplicam deep-merge sobre o documento atual
    - `reset()` devolve o store ao estado vazio

Responsabilidades do módulo:
    - Carregar arquivos YAML (`load`, `add`)
    - Aplicar documentos em tempo de execução (`merge`)
    - Leitura estrita (`get`) e leniente (atributos, `keys`, `fetch`)

Invariantes:
    - Documento e view são sempre consistentes: todo merge bem-sucedido
      reconstrói a view antes de retornar
    - Um `add`/`merge` que falha deixa o estado anterior intacto
    - O store é dono exclusivo do documento (inputs são copiados)

Limites explícitos:
    - Sem locking interno: chamadas concorrentes a `merge`/`reset` a partir
      de várias threads precisam ser serializadas pelo chamador
    - Não observa o arquivo em disco (sem hot-reload)
    - Não valida schema nem converte tipos
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml  # PyYAML

from .accessor import resolve_key_path
from .errors import ConfigFileNotFoundError, InvalidConfigError
from .hashing import compute_config_hash
from .logger import get_logger
from .merge import deep_merge
from .paths import DEFAULT_CONFIG_LOCATION, resolve_config_path
from .view import ConfigView

LOG = get_logger(__name__)

PathLike = Union[str, os.PathLike]


def _read_document(path: Path) -> Dict[str, Any]:
    """
    Lê e valida estruturalmente um arquivo YAML de configuração.

    Raises:
        InvalidConfigError: Se o YAML for inválido, vazio ou não for um mapping.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise InvalidConfigError(f"YAML unable to parse {path}: {exc}") from exc

    if not data:
        raise InvalidConfigError(f"YAML unable to parse empty {path}")

    if not isinstance(data, dict):
        raise InvalidConfigError(
            f"Config root deve ser mapping, recebido: {type(data).__name__} em {path}"
        )

    return data


class ConfigStore:
    """
    Holder do documento de configuração mesclado e da view derivada.

    Exemplo:
        store = ConfigStore()
        store.add(caller=__file__)              # <raiz>/config/config.yml
        store.merge({"database": {"pool": 10}})
        store.get("database.host")              # estrito
        store.database.port                     # leniente (None se ausente)

    Chaves de topo com o mesmo nome de membros do store (`data`, `view`,
    `sources`, `keys`, `fetch`, `get`, `merge`, `add`, `load`, `reset`,
    `fingerprint`, ...) ficam encobertas no acesso por atributo:
    `store.data` devolve o documento inteiro, não a chave `data`. Para
    esses nomes use `store.view.data`, `store["data"]` ou `store.get("data")`.
    """

    _OWN_ATTRIBUTES = frozenset({"_data", "_view", "_sources"})

    _instance: Optional["ConfigStore"] = None

    def __init__(self) -> None:
        self._data: Optional[Dict[str, Any]] = None
        self._view: Optional[ConfigView] = None
        self._sources: List[str] = []

    @classmethod
    def instance(cls) -> "ConfigStore":
        """Instância compartilhada do processo (criada sob demanda)."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def drop_instance(cls) -> None:
        """Descarta a instância compartilhada; a próxima chamada cria outra."""
        cls._instance = None

    # ------------------------------------------------------------------
    # Mutação
    # ------------------------------------------------------------------

    def load(self) -> "ConfigStore":
        """Carrega `config/config.yml` relativo ao diretório corrente."""
        return self.add(DEFAULT_CONFIG_LOCATION)

    def add(
        self,
        path: Optional[PathLike] = None,
        *,
        caller: Optional[PathLike] = None,
    ) -> "ConfigStore":
        """
        Carrega um arquivo YAML e o mescla no documento atual.

        Sem `path`, o caminho padrão é resolvido a partir de `caller`, o
        arquivo de código de quem chama (normalmente `__file__`).

        Args:
            path: Arquivo de configuração explícito.
            caller: Arquivo do chamador, usado quando `path` é omitido.

        Returns:
            ConfigStore: o próprio store, para encadeamento.

        Raises:
            ValueError: Se nem `path` nem `caller` forem informados.
            ConfigFileNotFoundError: Se o arquivo não existir ou o caminho
                não puder ser resolvido.
            InvalidConfigError: Se o documento for vazio, inválido ou não
                for um mapping.
        """
        if path is None:
            if caller is None:
                raise ValueError("add() requer `path` ou `caller`")
            path = resolve_config_path(caller)

        config_path = Path(path) if path else None
        if config_path is None or not config_path.is_file():
            raise ConfigFileNotFoundError(f"{os.fspath(path)} not found")

        LOG.debug("Reading configuration from %s", config_path)
        document = _read_document(config_path)

        self.merge(document)
        self._sources.append(str(config_path))
        return self

    def merge(self, document: Mapping) -> "ConfigStore":
        """
        Aplica um documento sobre a configuração atual (sem arquivo).

        Se nada foi carregado ainda, o documento é adotado (como cópia);
        caso contrário é aplicado via `deep_merge`. A view é reconstruída
        antes do retorno.

        Raises:
            InvalidConfigError: Se `document` não for um mapping.
        """
        if isinstance(document, ConfigView):
            document = document.to_dict()

        if not isinstance(document, Mapping):
            raise InvalidConfigError(
                f"merge requer mapping, recebido: {type(document).__name__}"
            )

        if self._data is None:
            merged = deepcopy(dict(document))
        else:
            merged = deep_merge(self._data, document)

        view = ConfigView(merged)
        self._data, self._view = merged, view
        LOG.debug("Configuration merged (%d top-level keys)", len(merged))
        return self

    def reset(self) -> "ConfigStore":
        """Limpa documento, view e fontes carregadas."""
        self._view = None
        self._data = None
        self._sources = []
        LOG.debug("Configuration reset")
        return self

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return self._view is None

    def get(self, key_path: Optional[str]) -> Any:
        """Leitura estrita por chave pontilhada (ver `resolve_key_path`)."""
        return resolve_key_path(self._view, key_path)

    def keys(self) -> List[Any]:
        return [] if self._view is None else self._view.keys()

    def fetch(self, key: Any, default: Optional[Any] = None) -> Any:
        if self._view is None:
            return default
        return self._view.fetch(key, default)

    @property
    def view(self) -> Optional[ConfigView]:
        return self._view

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        """Cópia profunda do documento atual (`None` quando vazio)."""
        return deepcopy(self._data)

    @property
    def sources(self) -> List[str]:
        """Arquivos carregados via `add`/`load`, em ordem."""
        return list(self._sources)

    def fingerprint(self) -> Optional[str]:
        """Hash canônico do documento atual (`None` quando vazio)."""
        if self._data is None:
            return None
        return compute_config_hash(self._data)

    def __getitem__(self, key: Any) -> Any:
        if self._data is None:
            raise KeyError(key)
        return self._view[key]

    def __getattr__(self, name: str) -> Any:
        # leitura leniente delegada à view
        if name in self._OWN_ATTRIBUTES or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        if self._view is None:
            return None
        return getattr(self._view, name)

    def __repr__(self) -> str:
        state = "empty" if self.is_empty() else f"keys={self.keys()!r}"
        return f"<ConfigStore {state}>"
