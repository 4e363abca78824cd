"""
Servicio para vaciar la raíz local tras un envío remoto (Single Responsibility)
"""
import logging
import shutil
from pathlib import Path
from typing import Optional, Union

from ..exceptions import CleanupError
from ..logger import LoggerService


class CleanupService:
    """Servicio para limpiar el área de staging"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or LoggerService.get_logger("CleanupService")

    def remove_all_contents(self, root: Union[str, Path]) -> int:
        """
        Elimina todo lo que hay bajo root, dejando root vacío

        Un fallo a mitad deja el borrado parcial tal cual.

        Args:
            root: Directorio a vaciar

        Returns:
            Cantidad de entradas eliminadas en el primer nivel

        Raises:
            CleanupError: Si alguna entrada no se puede listar o eliminar
        """
        # Una raíz vacía equivale a "." y vaciaría el directorio de trabajo
        if not str(root).strip() or Path(root) == Path("."):
            raise CleanupError(f"Raíz local vacía o relativa al directorio actual: {str(root)!r}")

        root = Path(root)
        try:
            entries = list(root.iterdir())
        except OSError as e:
            raise CleanupError(f"No se pudo listar {root}: {e}") from e

        for entry in entries:
            try:
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
            except OSError as e:
                raise CleanupError(f"No se pudo eliminar {entry}: {e}") from e

        self.logger.info(f"Limpieza completada: {len(entries)} entrada(s) eliminada(s) en {root}")
        return len(entries)
