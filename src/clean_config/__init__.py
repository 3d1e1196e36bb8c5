# src/clean_config/__init__.py
"""
Clean Config — configuração YAML ancorada na raiz do projeto.

Localiza `config/config.yml` a partir de qualquer arquivo do projeto
consumidor, carrega e mescla documentos YAML em um store e expõe os
valores de duas formas:

    - leitura estrita por chave pontilhada: `store.get("database.host")`
    - leitura leniente por atributo:        `store.database.host`

Arquitetura em alto nível:
    - paths        → raiz do projeto e caminho padrão da configuração
    - merge        → deep-merge puro de documentos
    - store        → ciclo load/add/merge/reset e leitura
    - accessor     → leitura estrita por chave pontilhada
    - view         → projeção leniente e somente leitura
    - configurable → inicialização a partir do arquivo do chamador
"""

from .accessor import resolve_key_path
from .configurable import Configurable, initialize
from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    InvalidConfigError,
    InvalidKeyPathError,
    MissingKeyError,
)
from .merge import deep_merge
from .paths import find_execution_root, resolve_config_path
from .store import ConfigStore
from .view import ConfigView

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigStore",
    "ConfigView",
    "Configurable",
    "InvalidConfigError",
    "InvalidKeyPathError",
    "MissingKeyError",
    "deep_merge",
    "find_execution_root",
    "initialize",
    "resolve_config_path",
    "resolve_key_path",
]
