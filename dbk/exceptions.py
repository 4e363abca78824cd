"""
Jerarquía de errores del sistema de backup

Todos los errores son fatales: los componentes los lanzan y solo el punto
de entrada los captura para registrar el fallo y terminar con código != 0.
"""
from typing import Optional, Sequence


class BackupError(Exception):
    """Error fatal en cualquier etapa del backup"""


class ConfigError(BackupError):
    """La configuración no se pudo localizar, leer o interpretar"""


class StagingError(BackupError):
    """No se pudo crear el directorio de staging"""


class DumpError(BackupError):
    """No se pudo crear el archivo de volcado de la base de datos"""


class SourceNotFoundError(BackupError):
    """El directorio de origen a copiar no existe"""


class ArchivePermissionError(BackupError):
    """No se pudieron ajustar los permisos del archivo comprimido"""


class CleanupError(BackupError):
    """Fallo al vaciar el directorio local"""


class CommandError(BackupError):
    """Una herramienta externa no se pudo lanzar o terminó con error"""

    def __init__(
        self,
        description: str,
        command: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = ""
    ):
        self.description = description
        self.command = list(command)
        self.returncode = returncode
        self.stderr = (stderr or "").strip()

        tool = self.command[0] if self.command else "?"
        if returncode is None:
            message = f"{description}: no se pudo ejecutar {tool}"
        else:
            message = f"{description}: {tool} terminó con código {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)
