# src/clean_config/paths.py
"""
Resolução da raiz do projeto e do caminho padrão de configuração.

A raiz do projeto é descoberta subindo pelos segmentos do caminho de um
arquivo pertencente ao projeto consumidor. Um segmento só é aceito como
ponto de ancoragem quando é um diretório de código convencional
(`SOURCE_DIRECTORIES`) e o diretório acima dele contém o manifesto de
dependências (`MANIFEST_MARKER`).

Regras da caminhada:
    - A primeira correspondência encontrada subindo a partir do arquivo vence
    - A caminhada continua até o topo, mas não sobrescreve a raiz encontrada
    - Ao testar um diretório de código, o segmento imediatamente acima
      dele também é consumido, sem ser testado
    - Nenhuma correspondência → string vazia (não é erro)

A partir da raiz, o arquivo de configuração fica em
`<raiz>/config/config.yml`; tanto o diretório quanto o nome do arquivo
derivam de `CONFIG_BASENAME`.

Limites explícitos:
    - Não lê nem valida o arquivo de configuração
    - Não inspeciona a pilha de chamadas: o chamador informa o próprio arquivo
"""

import os
from typing import Iterable, Union

CONFIG_BASENAME = "config"
CONFIG_DIRECTORY = CONFIG_BASENAME
CONFIG_FILE_NAME = f"{CONFIG_BASENAME}.yml"
DEFAULT_CONFIG_LOCATION = os.path.join(CONFIG_DIRECTORY, CONFIG_FILE_NAME)

MANIFEST_MARKER = "pyproject.toml"
SOURCE_DIRECTORIES = ("lib", "src", "spec", "tests", "bin")

PathLike = Union[str, os.PathLike]


def _split_segments(directory: str) -> tuple:
    directory = directory.rstrip(os.sep) or os.sep
    return tuple(directory.split(os.sep))


def find_execution_root(
    file_path: PathLike,
    *,
    marker: str = MANIFEST_MARKER,
    source_dirs: Iterable[str] = SOURCE_DIRECTORIES,
) -> str:
    """
    Encontra a raiz do projeto a partir de um arquivo (ou diretório) dele.

    Se o caminho tiver extensão, o diretório que o contém é usado; caso
    contrário o próprio caminho é tratado como diretório. Caminhos
    relativos são resolvidos contra o diretório corrente.

    Args:
        file_path: Arquivo ou diretório pertencente ao projeto consumidor.
        marker: Nome do manifesto que identifica a raiz.
        source_dirs: Nomes de diretórios de código reconhecidos.

    Returns:
        str: Diretório raiz do projeto, ou "" se nenhuma raiz for encontrada.
    """
    path = os.path.abspath(os.fspath(file_path))
    if os.path.splitext(path)[1]:
        path = os.path.dirname(path)

    recognized = frozenset(source_dirs)
    segments = _split_segments(path)
    project_root = ""

    remaining = len(segments)
    while remaining > 0:
        if segments[remaining - 1] in recognized and not project_root:
            remaining -= 1
            parent = os.sep.join(segments[:remaining]) or os.sep
            marker_location = os.path.join(parent, marker)
            if os.path.exists(marker_location):
                project_root = os.path.dirname(marker_location)
        remaining -= 1

    return project_root


def resolve_config_path(
    file_path: PathLike,
    *,
    marker: str = MANIFEST_MARKER,
    source_dirs: Iterable[str] = SOURCE_DIRECTORIES,
) -> str:
    """
    Resolve o caminho padrão do arquivo de configuração do projeto.

    Returns:
        str: `<raiz>/config/config.yml`, ou "" quando a raiz não é encontrada
        (sinal para não tentar carregar).
    """
    project_root = find_execution_root(
        file_path, marker=marker, source_dirs=source_dirs
    )
    if not project_root:
        return project_root
    return os.path.join(project_root, DEFAULT_CONFIG_LOCATION)
