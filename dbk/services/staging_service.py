"""
Servicio para preparar el directorio de staging
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..config import Config
from ..exceptions import StagingError
from ..logger import LoggerService


class StagingService:
    """Crea el directorio con marca de tiempo bajo la raíz local"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or LoggerService.get_logger("StagingService")

    @staticmethod
    def current_timestamp(now: Optional[datetime] = None) -> str:
        """
        Marca de tiempo con resolución de segundos (YYYYMMDD_HHMMSS)

        Args:
            now: Momento a formatear (por defecto el actual)

        Returns:
            Cadena de 15 caracteres
        """
        return (now or datetime.now()).strftime(Config.TIMESTAMP_FORMAT)

    def create(self, local_root: Union[str, Path], timestamp: str) -> Path:
        """
        Crea <local_root>/<timestamp> si no existe

        Un directorio existente se reutiliza tal cual: dos ejecuciones en el
        mismo segundo comparten directorio.

        Args:
            local_root: Raíz local de los backups
            timestamp: Marca de tiempo de la ejecución

        Returns:
            Ruta del directorio de staging

        Raises:
            StagingError: Si el directorio no se puede crear
        """
        staging_dir = Path(local_root) / timestamp
        if staging_dir.exists():
            self.logger.debug(f"El directorio ya existe: {staging_dir}")
            return staging_dir

        try:
            staging_dir.mkdir(mode=Config.STAGING_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise StagingError(f"No se pudo crear el directorio {staging_dir}: {e}") from e

        self.logger.info(f"Directorio creado {staging_dir}")
        return staging_dir
