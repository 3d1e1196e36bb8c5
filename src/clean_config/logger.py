# src/clean_config/logger.py
"""
Logging do Clean Config.

Logger de console com formato único. O nível é lido da variável de
ambiente `DEBUG`: qualquer valor não vazio ativa o nível DEBUG, caso
contrário o nível é INFO. O nível só afeta diagnóstico, nunca o fluxo
de controle.
"""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level() -> int:
    return logging.DEBUG if os.environ.get("DEBUG") else logging.INFO


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(resolve_log_level())
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    return logger
