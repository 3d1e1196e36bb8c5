# src/clean_config/errors.py
"""
Exceções canônicas do Clean Config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a resolução de caminho, o carregamento, o merge e a leitura estrita
da configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Nenhuma falha é recuperada internamente (exceto no hook de inclusão)
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções do pacote herdam de `ConfigError`
    - Uma exceção levantada durante `add`/`merge` implica estado intacto

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de qualquer falha do Clean Config sem
    mascarar erros de outras origens.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração não existe no disco.

    Inclui o caso em que o caminho não pôde ser resolvido a partir do
    arquivo do chamador (caminho vazio).

    Limites explícitos:
        - Não tenta criar o arquivo ou procurar locais alternativos
    """


class InvalidConfigError(ConfigError):
    """
    Exceção levantada quando o documento carregado não é uma configuração válida.

    Casos cobertos:
        - documento vazio (o parser devolve ausência de valor)
        - YAML sintaticamente inválido
        - raiz que não é um mapeamento chave-valor

    Este é o único erro rebaixado a warning pelo hook de inclusão.
    """


class MissingKeyError(ConfigError, LookupError):
    """
    Exceção levantada quando a leitura estrita encontra um segmento sem valor.

    Attributes:
        key_path (str): Prefixo pontilhado consumido até a falha (ex.: "a.x").
    """

    def __init__(self, key_path: str):
        self.key_path = key_path
        super().__init__(f"config_key {key_path} has no defined value")


class InvalidKeyPathError(ConfigError, ValueError):
    """Exceção levantada quando a chave pontilhada é vazia ou ausente."""
