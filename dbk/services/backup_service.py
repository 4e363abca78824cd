"""
Servicio principal que orquesta los backups
"""
import logging
import time
from pathlib import Path
from typing import Optional

from ..config import Config
from ..factories.strategy_factory import RemoteStrategyFactory
from ..logger import LoggerService
from ..models import AppConfig, BackupResult
from ..strategies.mysql_strategy import MySQLBackupStrategy
from ..strategies.rsync_strategy import RsyncFileStrategy
from ..strategies.tar_strategy import TarArchiveStrategy
from .cleanup_service import CleanupService
from .staging_service import StagingService


class BackupService:
    """Servicio principal que orquesta los backups"""

    def __init__(
        self,
        config: AppConfig,
        logger: Optional[logging.Logger] = None,
        staging_service: Optional[StagingService] = None,
        cleanup_service: Optional[CleanupService] = None,
        dump_strategy: Optional[MySQLBackupStrategy] = None,
        copy_strategy: Optional[RsyncFileStrategy] = None,
        archive_strategy: Optional[TarArchiveStrategy] = None
    ):
        """
        Inicializa el servicio de backup

        Args:
            config: Configuración de la ejecución
            logger: Logger a utilizar
            staging_service: Servicio de staging
            cleanup_service: Servicio de limpieza
            dump_strategy: Estrategia de volcado de la base de datos
            copy_strategy: Estrategia de copia de archivos
            archive_strategy: Estrategia de compresión
        """
        self.config = config
        self.logger = logger or LoggerService.get_logger("BackupService")

        self.staging_service = staging_service or StagingService()
        self.cleanup_service = cleanup_service or CleanupService()
        self.dump_strategy = dump_strategy or MySQLBackupStrategy(settings=config.backup)
        self.copy_strategy = copy_strategy or RsyncFileStrategy(settings=config.backup)
        self.archive_strategy = archive_strategy or TarArchiveStrategy(settings=config.backup)

    def run(self) -> BackupResult:
        """
        Ejecuta el proceso completo: staging, volcado, copia, compresión,
        envío remoto y limpieza

        Cualquier error se propaga sin reintentos ni limpieza.

        Returns:
            Resultado de la ejecución
        """
        self.logger.info("=" * 70)
        self.logger.info("INICIANDO PROCESO DE BACKUP")
        self.logger.info("=" * 70)
        start_time = time.time()

        timestamp = self.staging_service.current_timestamp()
        local_root = Path(self.config.local.dir)
        staging_dir = self.staging_service.create(local_root, timestamp)

        dump_file = self.dump_strategy.backup(self.config.mysql, staging_dir)
        self.copy_strategy.backup(self.config.file, staging_dir)

        archive_file = local_root / f"{timestamp}{Config.ARCHIVE_SUFFIX}"
        self.archive_strategy.compress(archive_file, staging_dir)

        result = BackupResult(
            timestamp=timestamp,
            staging_dir=staging_dir,
            dump_file=dump_file,
            archive_file=archive_file
        )

        remote_strategy = RemoteStrategyFactory.create(self.config.remote, self.config.backup)
        if remote_strategy:
            remote_strategy.sync(self.config.remote, archive_file)
            result.shipped = True
            result.remote_mode = remote_strategy.MODE
            self.cleanup_service.remove_all_contents(local_root)
        else:
            self.logger.info(f"Sin destino remoto configurado, se conserva {local_root}")

        result.duration_seconds = time.time() - start_time
        self._print_summary(result)
        return result

    def _print_summary(self, result: BackupResult):
        """
        Imprime resumen de la ejecución

        Args:
            result: Resultado de la ejecución
        """
        self.logger.info("-" * 70)
        self.logger.info("RESUMEN DEL PROCESO DE BACKUP")
        self.logger.info(f"Marca de tiempo: {result.timestamp}")
        self.logger.info(f"Archivo: {result.archive_file}")

        if result.shipped:
            self.logger.info(f"Enviado a {self.config.remote.destination} ({result.remote_mode})")
        elif result.archive_file.exists():
            size_mb = result.archive_file.stat().st_size / (1024 * 1024)
            self.logger.info(f"Tamaño: {size_mb:.2f} MB")

        self.logger.info(f"Tiempo total: {result.duration_seconds:.2f}s")
        self.logger.info("=" * 70)
