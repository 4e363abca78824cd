"""
Repositorio para manejar configuración (Dependency Inversion)
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..config import Config
from ..exceptions import ConfigError
from ..logger import LoggerService
from ..models import (
    AppConfig,
    BackupSettings,
    FileConfig,
    LocalConfig,
    MysqlConfig,
    RemoteConfig,
)


class ConfigRepository:
    """Repositorio para manejar configuración"""

    # Campos que admiten referencias ${VAR}
    CREDENTIAL_FIELDS = {
        'mysql': ('user', 'password'),
        'remote': ('user', 'password'),
    }

    def __init__(self, config_file: Optional[Path] = None, logger: Optional[logging.Logger] = None):
        """
        Inicializa el repositorio de configuración

        Args:
            config_file: Ruta al archivo de configuración (por defecto junto al ejecutable)
            logger: Logger a utilizar
        """
        self.config_file = Path(config_file) if config_file else Config.config_file()
        self.logger = logger or LoggerService.get_logger("ConfigRepository")
        self._raw_config = None

    def load(self) -> Dict:
        """
        Carga configuración desde archivo YAML

        Returns:
            Diccionario con la configuración, claves de sección en minúsculas

        Raises:
            ConfigError: Si el archivo no se puede leer o no tiene la forma esperada
        """
        try:
            with open(self.config_file, "r", encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Error fatal en archivo de configuración {self.config_file}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"No se pudo interpretar el YAML {self.config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"La configuración debe ser un mapa YAML, se obtuvo {type(data).__name__}"
            )

        self._raw_config = {self._normalize_key(k): v for k, v in data.items()}
        self.logger.info(f"Configuración cargada exitosamente: {self.config_file}")
        return self._raw_config

    def get_config(self) -> AppConfig:
        """
        Construye la configuración tipada de la ejecución

        Returns:
            Objeto AppConfig
        """
        if self._raw_config is None:
            self.load()

        mysql = self._section('mysql')
        local = self._section('local')
        remote = self._section('remote')
        file = self._section('file')

        return AppConfig(
            mysql=MysqlConfig(
                host=self._scalar(mysql.get('host')),
                port=self._scalar(mysql.get('port')),
                user=self._field(mysql, 'mysql', 'user'),
                password=self._field(mysql, 'mysql', 'password'),
                name=self._scalar(mysql.get('name')),
            ),
            local=LocalConfig(dir=self._scalar(local.get('dir'))),
            remote=RemoteConfig(
                host=self._scalar(remote.get('host')),
                user=self._field(remote, 'remote', 'user'),
                password=self._field(remote, 'remote', 'password'),
                private_key=self._scalar(remote.get('privatekey')),
                dir=self._scalar(remote.get('dir')),
            ),
            file=FileConfig(path=self._scalar(file.get('path'))),
            backup=self.get_backup_settings(),
        )

    def get_backup_settings(self) -> BackupSettings:
        """
        Obtiene los ajustes opcionales de la sección backup

        Returns:
            Objeto BackupSettings
        """
        if self._raw_config is None:
            self.load()

        settings = self._section('backup')
        kwargs = {}

        if 'archivemode' in settings:
            kwargs['archive_mode'] = self._parse_mode(settings['archivemode'])

        if 'passwordviaenv' in settings:
            value = settings['passwordviaenv']
            if not isinstance(value, bool):
                raise ConfigError(f"backup.password_via_env debe ser booleano, se obtuvo {value!r}")
            kwargs['password_via_env'] = value

        try:
            return BackupSettings(**kwargs)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def _section(self, name: str) -> Dict[str, Any]:
        """
        Devuelve una sección con claves normalizadas

        Una sección ausente o vacía equivale a un mapa vacío.
        """
        section = self._raw_config.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigError(f"La sección '{name}' debe ser un mapa YAML")
        return {self._normalize_key(k): v for k, v in section.items()}

    def _field(self, section: Dict[str, Any], section_name: str, key: str) -> str:
        value = self._scalar(section.get(key))
        if key in self.CREDENTIAL_FIELDS.get(section_name, ()):
            return self._resolve_credential(value)
        return value

    @staticmethod
    def _normalize_key(key: Any) -> str:
        # privateKey, private_key y privatekey son la misma clave
        return str(key).lower().replace('_', '').replace('-', '')

    @staticmethod
    def _scalar(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            raise ConfigError(f"Se esperaba un valor escalar, se obtuvo {value!r}")
        return str(value)

    @staticmethod
    def _parse_mode(value: Any) -> Optional[int]:
        """
        Interpreta archive_mode: null desactiva el chmod, texto se lee en octal
        """
        if value is None:
            return None
        if isinstance(value, bool):
            raise ConfigError(f"backup.archive_mode inválido: {value!r}")
        if isinstance(value, int):
            return value
        try:
            return int(str(value), 8)
        except ValueError as e:
            raise ConfigError(f"backup.archive_mode inválido: {value!r}") from e

    def _resolve_credential(self, value: str) -> str:
        """
        Resuelve credencial desde variable de entorno si es necesario

        Args:
            value: Valor que puede contener referencia a variable de entorno

        Returns:
            Valor resuelto
        """
        if value.startswith("${") and value.endswith("}"):
            env_var = value[2:-1]
            resolved = os.getenv(env_var, "")
            if not resolved:
                self.logger.warning(f"Variable de entorno no encontrada: {env_var}")
            return resolved
        return value

    def create_example_config(self) -> bool:
        """
        Crea un archivo de configuración de ejemplo

        Returns:
            True si se creó exitosamente
        """
        if self.config_file.exists():
            self.logger.warning(f"El archivo de configuración ya existe: {self.config_file}")
            return False

        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding='utf-8') as f:
                f.write(Config.EXAMPLE_CONFIG)
            self.logger.info(f"Configuración de ejemplo creada: {self.config_file}")
            return True
        except OSError as e:
            self.logger.error(f"Error al crear la configuración de ejemplo: {e}")
            return False
