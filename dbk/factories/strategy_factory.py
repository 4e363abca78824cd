"""
Factory para crear estrategias de envío remoto
"""
import logging
from typing import Optional

from ..models import BackupSettings, RemoteConfig
from ..strategies.remote_strategy import (
    KeyRemoteSyncStrategy,
    PasswordRemoteSyncStrategy,
    RemoteSyncStrategy,
)


class RemoteStrategyFactory:
    """Factory para crear estrategias de envío (Factory Pattern)"""

    # Mapeo de modos a estrategias
    _strategies = {
        'key': KeyRemoteSyncStrategy,
        'password': PasswordRemoteSyncStrategy,
    }

    @classmethod
    def create(
        cls,
        remote: RemoteConfig,
        settings: Optional[BackupSettings] = None,
        logger: Optional[logging.Logger] = None
    ) -> Optional[RemoteSyncStrategy]:
        """
        Crea la estrategia de envío según la configuración remota

        La clave privada tiene prioridad; sin clave ni usuario no hay envío.

        Args:
            remote: Configuración del destino remoto
            settings: Ajustes opcionales del proceso
            logger: Logger a utilizar

        Returns:
            Instancia de RemoteSyncStrategy o None si no hay envío remoto
        """
        mode = remote.mode
        if mode is None:
            return None
        return cls._strategies[mode](logger=logger, settings=settings)
