# src/jornada_clt/logging_config.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """(Re)configura os handlers do loguru.

    Remove o handler padrão para evitar duplicação de logs no console.
    O arquivo só é criado quando um diretório é informado: o núcleo de
    cálculo é usado como biblioteca e não deve sair escrevendo em disco.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        # rotation="10 MB": novo arquivo quando o atual atingir 10 MB.
        # retention="30 days": arquivos mais antigos são apagados.
        logger.add(
            str(Path(log_dir) / "jornada_{time}.log"),
            rotation="10 MB",
            retention="30 days",
            level="DEBUG",
            format=FILE_FORMAT,
        )


configure_logging()

# Exporta o logger configurado para ser usado em outros módulos.
log = logger
