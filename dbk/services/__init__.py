"""
Servicios de la aplicación
"""
from .backup_service import BackupService
from .cleanup_service import CleanupService
from .staging_service import StagingService

__all__ = [
    'BackupService',
    'CleanupService',
    'StagingService'
]
