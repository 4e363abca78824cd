"""
Estrategia de backup para MySQL/MariaDB
"""
from pathlib import Path
from typing import List

from .base_strategy import BackupStrategy
from ..exceptions import DumpError
from ..models import MysqlConfig


class MySQLBackupStrategy(BackupStrategy):
    """Estrategia de backup para MySQL/MariaDB"""

    TOOL = 'mysqldump'

    def build_command(self, mysql: MysqlConfig) -> List[str]:
        # La contraseña viaja como argumento y es visible en la tabla de procesos
        return [
            self.TOOL,
            f'-h{mysql.host}',
            f'-P{mysql.port}',
            f'-u{mysql.user}',
            f'-p{mysql.password}',
            mysql.name,
        ]

    def backup(self, mysql: MysqlConfig, backup_dir: Path) -> Path:
        """
        Vuelca la base de datos en <backup_dir>/<nombre>.sql usando mysqldump

        Args:
            mysql: Configuración de la base de datos
            backup_dir: Directorio de staging

        Returns:
            Ruta del archivo de volcado

        Raises:
            DumpError: Si no se puede crear el archivo de salida
            CommandError: Si mysqldump no se puede lanzar o falla
        """
        output_file = Path(backup_dir) / f"{mysql.name}.sql"
        cmd = self.build_command(mysql)
        self.logger.info(f"Respaldando base de datos {mysql.name} en {output_file}")

        try:
            f = open(output_file, 'wb')
        except OSError as e:
            raise DumpError(f"No se pudo crear el archivo de salida {output_file}: {e}") from e

        with f:
            self._run_command(cmd, "Falló la ejecución de mysqldump", stdout=f, secrets=[mysql.password])

        self.logger.info(f"Backup de base de datos completado: {output_file}")
        return output_file
