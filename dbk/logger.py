"""
Servicio de logging siguiendo principio Single Responsibility
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from .config import Config


class LoggerService:
    """Servicio centralizado de logging"""

    _loggers: Dict[str, logging.Logger] = {}
    _log_dir: Optional[Path] = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Obtiene o crea un logger con el nombre especificado

        Args:
            name: Nombre del logger

        Returns:
            Logger configurado
        """
        if name in cls._loggers:
            return cls._loggers[name]

        logger = cls._setup_logger(name)
        cls._loggers[name] = logger
        return logger

    @classmethod
    def enable_file_logging(cls, log_dir: Path):
        """
        Activa el log a archivo diario para los loggers actuales y futuros

        Args:
            log_dir: Directorio donde se escriben los archivos de log
        """
        log_dir.mkdir(parents=True, exist_ok=True)
        cls._log_dir = log_dir

        for logger in cls._loggers.values():
            if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
                logger.addHandler(cls._file_handler())

    @classmethod
    def _file_handler(cls) -> logging.FileHandler:
        log_file = cls._log_dir / f"dbk_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(Config.LOG_LEVEL)
        file_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
        return file_handler

    @classmethod
    def _setup_logger(cls, name: str) -> logging.Logger:
        """
        Configura un nuevo logger

        Args:
            name: Nombre del logger

        Returns:
            Logger configurado
        """
        logger = logging.getLogger(name)
        logger.setLevel(Config.LOG_LEVEL)

        # Evitar duplicar handlers
        if logger.handlers:
            return logger

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(Config.LOG_LEVEL)
        console_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
        logger.addHandler(console_handler)

        if cls._log_dir is not None:
            logger.addHandler(cls._file_handler())

        return logger
