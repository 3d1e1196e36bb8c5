# src/clean_config/configurable.py
"""
Inicialização automática da configuração a partir do código consumidor.

Dois pontos de entrada equivalentes:
    - `initialize(__file__)`: chamada explícita com o arquivo do chamador
    - `Configurable`: mixin; ao ser herdado, carrega a configuração usando
      o arquivo do módulo que define a subclasse

Política de falhas:
    - Config não encontrada → log de debug, nada é carregado
    - `InvalidConfigError` → log de warning, estado anterior mantido
    - Qualquer outro erro propaga
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from .errors import InvalidConfigError
from .logger import get_logger
from .paths import PathLike, resolve_config_path
from .store import ConfigStore

LOG = get_logger(__name__)


def initialize(caller_file: PathLike, *, store: Optional[ConfigStore] = None) -> ConfigStore:
    """
    Carrega `<raiz>/config/config.yml` do projeto ao qual `caller_file` pertence.

    Args:
        caller_file: Arquivo de código do chamador (normalmente `__file__`).
        store: Store de destino; por padrão a instância do processo.

    Returns:
        ConfigStore: o store utilizado, carregado ou não.
    """
    store = store if store is not None else ConfigStore.instance()
    LOG.debug("calling_file: %s", caller_file)
    config_path = resolve_config_path(caller_file)

    if not config_path or not os.path.exists(config_path):
        LOG.debug(
            "Expected config file %s not found. Not loading configuration",
            config_path or "<unresolved>",
        )
        return store

    try:
        store.add(config_path)
    except InvalidConfigError:
        LOG.warning(
            "Read configuration from %s, but configuration not valid. "
            "Ignoring, check your config",
            config_path,
        )
    return store


class Configurable:
    """
    Mixin que inicializa a configuração quando uma subclasse é definida.

    Exemplo:
        class Core(Configurable):
            def run(self):
                return self.config.get("core.workers")

    Subclasses podem definir `config_store` para usar um store próprio
    em vez da instância do processo.
    """

    config_store: Optional[ConfigStore] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        module = sys.modules.get(cls.__module__)
        module_file = getattr(module, "__file__", None)
        if module_file is None:
            LOG.debug("No source file for %s. Not loading configuration", cls.__qualname__)
            return
        initialize(module_file, store=cls.config_store)

    @property
    def config(self) -> ConfigStore:
        store = type(self).config_store
        return store if store is not None else ConfigStore.instance()
