# tests/conftest.py
"""
Fixtures compartilhados para testes do Clean Config.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos YAML de configuração (base e override)
- uma árvore de projeto temporária com manifesto e `config/config.yml`
- um `ConfigStore` isolado por teste

Decisões arquiteturais:
    - Conteúdo YAML fornecido como string; a escrita em disco fica
      a cargo de cada teste via `tmp_path`
    - A instância compartilhada do store é descartada após cada teste

Invariantes:
    - Nenhuma fixture depende do diretório corrente
    - Nenhum teste enxerga estado deixado por outro teste
"""

from pathlib import Path

import pytest

from clean_config import ConfigStore


@pytest.fixture(autouse=True)
def _isolated_shared_store():
    """Descarta a instância compartilhada do store antes e depois de cada teste."""
    ConfigStore.drop_instance()
    yield
    ConfigStore.drop_instance()


@pytest.fixture
def store() -> ConfigStore:
    return ConfigStore()


@pytest.fixture
def project_config_yaml() -> str:
    """
    YAML de configuração semelhante ao uso real de um projeto consumidor.

    Contém mapeamentos aninhados, uma lista e escalares de tipos variados,
    cobrindo os três tipos de nó da view.

    Returns:
        str: Conteúdo de `config/config.yml`.
    """
    return """\
database:
  host: localhost
  port: 5432
  replicas:
    - host: replica-1
      port: 5433
    - host: replica-2
      port: 5434
features:
  - search
  - export
logging:
  verbose: false
  level: INFO
"""


@pytest.fixture
def override_config_yaml() -> str:
    """YAML aplicado sobre `project_config_yaml` (override parcial)."""
    return """\
database:
  port: 6543
features:
  - search
"""


@pytest.fixture
def project_tree(tmp_path: Path, project_config_yaml: str) -> Path:
    """
    Cria um projeto temporário com a estrutura esperada pela resolução de raiz.

    Estrutura:
        myproj/
            pyproject.toml
            config/config.yml
            lib/app/worker.py

    Returns:
        Path: Diretório raiz do projeto (`myproj`).
    """
    root = tmp_path / "myproj"
    (root / "config").mkdir(parents=True)
    (root / "lib" / "app").mkdir(parents=True)
    (root / "pyproject.toml").write_text("[project]\nname = 'myproj'\n", encoding="utf-8")
    (root / "config" / "config.yml").write_text(project_config_yaml, encoding="utf-8")
    (root / "lib" / "app" / "worker.py").write_text("", encoding="utf-8")
    return root
