"""
Estrategia de copia del árbol de archivos con rsync
"""
from pathlib import Path

from .base_strategy import BackupStrategy
from ..exceptions import SourceNotFoundError
from ..models import FileConfig


class RsyncFileStrategy(BackupStrategy):
    """Copia recursiva que preserva atributos (rsync -a)"""

    TOOL = 'rsync'

    def backup(self, file_config: FileConfig, backup_dir: Path) -> Path:
        """
        Copia el directorio de origen dentro del directorio de staging

        Args:
            file_config: Configuración del árbol de archivos
            backup_dir: Directorio de staging

        Returns:
            Directorio de staging

        Raises:
            SourceNotFoundError: Si el origen no existe (rsync no llega a ejecutarse)
            CommandError: Si rsync no se puede lanzar o falla
        """
        source = file_config.path
        if not source or not Path(source).exists():
            raise SourceNotFoundError(f"directory does not exist: {source}")

        self.logger.info(f"Copiando {source} en {backup_dir}")
        self._run_command(
            [self.TOOL, '-a', source, str(backup_dir)],
            "Falló la copia de archivos"
        )
        self.logger.info("Copia de archivos completada")
        return Path(backup_dir)
