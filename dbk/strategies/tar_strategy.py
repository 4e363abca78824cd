"""
Estrategia de compresión del directorio de staging con tar
"""
import os
from pathlib import Path

from .base_strategy import BackupStrategy
from ..exceptions import ArchivePermissionError


class TarArchiveStrategy(BackupStrategy):
    """Genera un .tar.gz con rutas relativas a la raíz del directorio"""

    TOOL = 'tar'

    def compress(self, archive_file: Path, source_dir: Path) -> Path:
        """
        Comprime source_dir en archive_file y ajusta sus permisos

        Args:
            archive_file: Ruta del archivo .tar.gz a generar
            source_dir: Directorio a comprimir

        Returns:
            Ruta del archivo generado

        Raises:
            CommandError: Si tar no se puede lanzar o falla
            ArchivePermissionError: Si no se pueden aplicar los permisos
        """
        archive_file = Path(archive_file)
        self.logger.info(f"Comprimiendo directorio {source_dir} en {archive_file}")

        self._run_command(
            [self.TOOL, '-czf', str(archive_file), '-C', str(source_dir), '.'],
            "Falló la compresión del directorio"
        )

        mode = self.settings.archive_mode
        if mode is not None:
            try:
                os.chmod(archive_file, mode)
            except OSError as e:
                raise ArchivePermissionError(
                    f"No se pudieron aplicar los permisos {mode:o} a {archive_file}: {e}"
                ) from e

        self.logger.info(f"Directorio comprimido correctamente: {archive_file}")
        return archive_file
