"""
Configuración centralizada del sistema de backup
"""
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .exceptions import ConfigError


class Config:
    """Configuración centralizada del sistema"""

    CONFIG_FILENAME = "config.yaml"
    ENV_FILENAME = ".env"
    LOG_DIRNAME = "Logs"

    # 15 caracteres: YYYYMMDD_HHMMSS
    TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
    ARCHIVE_SUFFIX = ".tar.gz"

    STAGING_DIR_MODE = 0o777
    DEFAULT_ARCHIVE_MODE = 0o777

    LOG_LEVEL = logging.INFO
    LOG_FORMAT = '[DBK] %(asctime)s - %(name)s - %(levelname)s - %(message)s'

    EXAMPLE_CONFIG = """\
mysql:
  host: 127.0.0.1
  port: 3306
  user: backup_user
  password: ${DB_PASSWORD}
  name: shop

local:
  dir: /data/backup

remote:
  host: backup.example.com
  user: backup
  password: ${REMOTE_PASSWORD}
  privatekey: /root/.ssh/id_rsa
  dir: /data/remote_backup

file:
  path: /var/www/uploads

backup:
  archive_mode: "0777"
  password_via_env: true
"""

    @classmethod
    def executable_dir(cls) -> Path:
        """
        Directorio del ejecutable en curso, con enlaces simbólicos resueltos

        Returns:
            Ruta absoluta del directorio

        Raises:
            ConfigError: Si la ruta del ejecutable no se puede determinar
        """
        argv0 = sys.argv[0] if sys.argv else ""
        if not argv0:
            raise ConfigError("No se pudo determinar la ruta del ejecutable")
        try:
            return Path(argv0).resolve().parent
        except (OSError, RuntimeError) as e:
            raise ConfigError(f"No se pudo resolver la ruta del ejecutable: {e}") from e

    @classmethod
    def config_file(cls) -> Path:
        return cls.executable_dir() / cls.CONFIG_FILENAME

    @classmethod
    def env_file(cls) -> Path:
        return cls.executable_dir() / cls.ENV_FILENAME

    @classmethod
    def log_dir(cls) -> Path:
        return cls.executable_dir() / cls.LOG_DIRNAME

    @classmethod
    def load_env(cls) -> bool:
        """
        Carga variables de entorno desde el .env junto al ejecutable

        Returns:
            True si se encontró y cargó el archivo
        """
        env_file = cls.env_file()
        if not env_file.exists():
            return False
        load_dotenv(env_file)
        return True
