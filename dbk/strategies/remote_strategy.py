"""
Estrategias de envío remoto del archivo comprimido
"""
import os
import shlex
from abc import abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .base_strategy import BackupStrategy
from ..models import RemoteConfig


class RemoteSyncStrategy(BackupStrategy):
    """Envía un único archivo a user@host:dir con rsync"""

    MODE = ""

    @abstractmethod
    def build_command(self, remote: RemoteConfig, archive_file: Path) -> Tuple[List[str], Optional[Dict[str, str]]]:
        """
        Construye el comando de envío

        Args:
            remote: Configuración del destino remoto
            archive_file: Archivo a enviar

        Returns:
            Tupla (comando, entorno del proceso o None para heredar el actual)
        """
        pass

    def sync(self, remote: RemoteConfig, archive_file: Path):
        """
        Sincroniza el archivo con el destino remoto

        Raises:
            CommandError: Si el comando no se puede lanzar o falla
        """
        cmd, env = self.build_command(remote, archive_file)
        secrets = self.secrets(remote)
        self.logger.info(
            f"Sincronizando con el host remoto usando rsync: "
            f"{self.mask_command(cmd, secrets)}"
        )
        self._run_command(
            cmd,
            "Falló la sincronización con el host remoto",
            env=env,
            secrets=secrets
        )
        self.logger.info("Sincronización completada")

    def secrets(self, remote: RemoteConfig) -> List[str]:
        return []


class KeyRemoteSyncStrategy(RemoteSyncStrategy):
    """Envío autenticado con clave privada SSH"""

    MODE = "key"

    def build_command(self, remote: RemoteConfig, archive_file: Path) -> Tuple[List[str], Optional[Dict[str, str]]]:
        cmd = [
            'rsync',
            '-avz',
            '-e',
            f"ssh -i {shlex.quote(remote.private_key.strip())}",
            str(archive_file),
            remote.destination,
        ]
        return cmd, None


class PasswordRemoteSyncStrategy(RemoteSyncStrategy):
    """Envío autenticado con contraseña a través de sshpass"""

    MODE = "password"

    def secrets(self, remote: RemoteConfig) -> List[str]:
        return [remote.password]

    def build_command(self, remote: RemoteConfig, archive_file: Path) -> Tuple[List[str], Optional[Dict[str, str]]]:
        rsync_cmd = ['rsync', '-av', str(archive_file), remote.destination]

        if self.settings.password_via_env:
            # sshpass -e lee la contraseña de SSHPASS, fuera de la línea de comandos
            env = os.environ.copy()
            env['SSHPASS'] = remote.password
            return ['sshpass', '-e'] + rsync_cmd, env

        return ['sshpass', '-p', remote.password] + rsync_cmd, None
