# tests/config/test_configurable.py
"""
Testes da inicialização a partir do arquivo do chamador.

Os testes asseguram que:
- `initialize` carrega `config/config.yml` da raiz do projeto do chamador
- a ausência de configuração não é erro
- configuração inválida vira warning e o estado anterior é mantido
- outros erros propagam
- o mixin `Configurable` carrega a configuração ao ser herdado
"""

import importlib.util
import logging
import sys
from pathlib import Path

import pytest

from clean_config import ConfigStore, Configurable, initialize
from clean_config.errors import ConfigFileNotFoundError


def _caller(project_tree: Path) -> Path:
    return project_tree / "lib" / "app" / "worker.py"


def test_initialize_loads_project_config(store: ConfigStore, project_tree: Path):
    assert initialize(_caller(project_tree), store=store) is store
    assert store.get("database.host") == "localhost"


def test_initialize_uses_shared_store_by_default(project_tree: Path):
    initialize(_caller(project_tree))
    assert ConfigStore.instance().get("database.port") == 5432


def test_initialize_without_config_is_noop(store: ConfigStore, tmp_path: Path):
    initialize(tmp_path / "elsewhere" / "module.py", store=store)
    assert store.is_empty()


def test_initialize_root_without_config_file(store: ConfigStore, project_tree: Path):
    (project_tree / "config" / "config.yml").unlink()
    initialize(_caller(project_tree), store=store)
    assert store.is_empty()


def test_initialize_invalid_config_logs_warning(
    store: ConfigStore, project_tree: Path, caplog
):
    """
    Verifica que `InvalidConfigError` é rebaixado a warning no hook.

    O documento previamente carregado no store não é alterado.
    """
    store.merge({"previous": {"value": 1}})
    (project_tree / "config" / "config.yml").write_text("", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="clean_config"):
        initialize(_caller(project_tree), store=store)

    assert store.data == {"previous": {"value": 1}}
    assert any(
        record.levelno == logging.WARNING and "configuration not valid" in record.getMessage()
        for record in caplog.records
    )


def test_initialize_other_errors_propagate(store: ConfigStore, project_tree: Path):
    config_file = project_tree / "config" / "config.yml"
    config_file.unlink()
    config_file.mkdir()
    with pytest.raises(ConfigFileNotFoundError):
        initialize(_caller(project_tree), store=store)


def test_configurable_subclass_loads_config(project_tree: Path, monkeypatch):
    """
    Verifica que herdar de `Configurable` carrega a configuração do projeto.

    O módulo da subclasse vive dentro do projeto temporário, como em um
    projeto consumidor real.
    """
    module_path = project_tree / "lib" / "app" / "core_one.py"
    module_path.write_text(
        "from clean_config import Configurable\n"
        "\n"
        "\n"
        "class CoreOne(Configurable):\n"
        "    pass\n",
        encoding="utf-8",
    )
    spec = importlib.util.spec_from_file_location("core_one", module_path)
    module = importlib.util.module_from_spec(spec)
    monkeypatch.setitem(sys.modules, "core_one", module)
    spec.loader.exec_module(module)

    instance = module.CoreOne()
    assert instance.config is ConfigStore.instance()
    assert instance.config.get("database.replicas")[0].host == "replica-1"


def test_configurable_with_injected_store(store: ConfigStore):
    class Local(Configurable):
        config_store = store

    assert Local().config is store
    assert store.is_empty()


def test_configurable_without_config_does_not_fail():
    class ConfigTest(Configurable):
        pass

    assert isinstance(ConfigTest().config, ConfigStore)
