"""
Modelos de datos del sistema
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import Config


@dataclass(frozen=True)
class MysqlConfig:
    """Parámetros de conexión de la base de datos a volcar"""
    host: str = ""
    port: str = ""
    user: str = ""
    password: str = field(default="", repr=False)
    name: str = ""


@dataclass(frozen=True)
class LocalConfig:
    """Raíz local donde se preparan los backups"""
    dir: str = ""


@dataclass(frozen=True)
class RemoteConfig:
    """Destino remoto del archivo comprimido"""
    host: str = ""
    user: str = ""
    password: str = field(default="", repr=False)
    private_key: str = ""
    dir: str = ""

    @property
    def mode(self) -> Optional[str]:
        """
        Modo de envío según la configuración

        La clave privada tiene prioridad sobre el usuario.

        Returns:
            'key', 'password' o None si no hay envío remoto
        """
        if self.private_key.strip():
            return "key"
        if self.user.strip():
            return "password"
        return None

    @property
    def destination(self) -> str:
        return f"{self.user}@{self.host}:{self.dir}"


@dataclass(frozen=True)
class FileConfig:
    """Árbol de archivos a copiar"""
    path: str = ""


@dataclass(frozen=True)
class BackupSettings:
    """Ajustes opcionales del proceso"""
    archive_mode: Optional[int] = Config.DEFAULT_ARCHIVE_MODE
    password_via_env: bool = True

    def __post_init__(self):
        """Validación después de inicialización"""
        # Solo bits rwx: un 777 sin comillas llega como decimal (0o1411) y se rechaza
        if self.archive_mode is not None and not 0 <= self.archive_mode <= 0o777:
            raise ValueError(
                f"archive_mode fuera de rango ({self.archive_mode:o} en octal); "
                "escríbelo entre comillas, por ejemplo \"0777\""
            )


@dataclass(frozen=True)
class AppConfig:
    """Configuración completa de una ejecución"""
    mysql: MysqlConfig = field(default_factory=MysqlConfig)
    local: LocalConfig = field(default_factory=LocalConfig)
    remote: RemoteConfig = field(default_factory=RemoteConfig)
    file: FileConfig = field(default_factory=FileConfig)
    backup: BackupSettings = field(default_factory=BackupSettings)


@dataclass
class BackupResult:
    """Resultado de una ejecución completa"""
    timestamp: str
    staging_dir: Path
    dump_file: Path
    archive_file: Path
    shipped: bool = False
    remote_mode: Optional[str] = None
    duration_seconds: float = 0.0

    def __str__(self):
        if self.shipped:
            return (
                f"{self.archive_file.name} enviado ({self.remote_mode}) "
                f"en {self.duration_seconds:.2f}s"
            )
        return f"{self.archive_file} conservado localmente ({self.duration_seconds:.2f}s)"
