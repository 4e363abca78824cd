"""
Estrategia base para las etapas que delegan en herramientas externas
"""
import logging
import subprocess
from abc import ABC
from typing import IO, Dict, Iterable, List, Optional

from ..exceptions import CommandError
from ..logger import LoggerService
from ..models import BackupSettings

MASK = "******"


class BackupStrategy(ABC):
    """Interfaz abstracta para estrategias de backup (Open/Closed Principle)"""

    def __init__(self, logger: Optional[logging.Logger] = None, settings: Optional[BackupSettings] = None):
        """
        Inicializa la estrategia

        Args:
            logger: Logger a utilizar (por defecto uno con el nombre de la clase)
            settings: Ajustes opcionales del proceso
        """
        self.logger = logger or LoggerService.get_logger(self.__class__.__name__)
        self.settings = settings or BackupSettings()

    def _run_command(
        self,
        cmd: List[str],
        description: str,
        stdout: Optional[IO] = None,
        env: Optional[Dict[str, str]] = None,
        secrets: Iterable[str] = ()
    ) -> subprocess.CompletedProcess:
        """
        Ejecuta un comando externo y espera a que termine

        Args:
            cmd: Comando y argumentos
            description: Descripción usada en el mensaje de error
            stdout: Archivo al que redirigir la salida estándar (capturada si es None)
            env: Entorno del proceso hijo
            secrets: Valores a ocultar en los logs

        Returns:
            Proceso completado

        Raises:
            CommandError: Si el comando no se puede lanzar o termina con código != 0
        """
        self.logger.debug(f"Ejecutando: {self.mask_command(cmd, secrets)}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE if stdout is None else stdout,
                stderr=subprocess.PIPE,
                env=env,
                text=True,
                errors='replace'
            )
        except OSError as e:
            raise CommandError(description, cmd, stderr=str(e)) from e

        if result.returncode != 0:
            raise CommandError(description, cmd, result.returncode, result.stderr)

        if result.stdout:
            self.logger.debug(result.stdout.strip())
        return result

    @staticmethod
    def mask_command(cmd: List[str], secrets: Iterable[str] = ()) -> str:
        """
        Representa un comando para los logs ocultando los secretos

        Args:
            cmd: Comando y argumentos
            secrets: Valores a ocultar

        Returns:
            Comando como texto
        """
        secrets = [s for s in secrets if s]
        parts = []
        for arg in cmd:
            for secret in secrets:
                arg = arg.replace(secret, MASK)
            parts.append(arg)
        return " ".join(parts)
