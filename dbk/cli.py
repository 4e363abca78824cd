"""
Punto de entrada del programa de backup

Uso:
    dbk             # Ejecutar el backup con config.yaml junto al ejecutable
    dbk --init      # Crear un config.yaml de ejemplo
    dbk --version   # Mostrar la versión
"""
import argparse
import sys
import traceback

from . import __version__
from .config import Config
from .exceptions import BackupError, ConfigError
from .logger import LoggerService
from .repositories.config_repository import ConfigRepository
from .services.backup_service import BackupService


def parse_arguments(argv=None):
    """
    Parsea argumentos de línea de comandos

    Returns:
        Namespace con los argumentos parseados
    """
    parser = argparse.ArgumentParser(
        prog='dbk',
        description='Backup de MySQL y archivos con envío remoto por rsync',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
La configuración se lee de config.yaml en el directorio del ejecutable.

Ejemplos:
  dbk             # Ejecutar el backup
  dbk --init      # Crear config.yaml de ejemplo
        """
    )

    parser.add_argument(
        '--init',
        action='store_true',
        help='Crear un config.yaml de ejemplo junto al ejecutable'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def initialize_config() -> bool:
    """
    Crea el archivo de configuración de ejemplo si no existe

    Returns:
        True si se creó el archivo
    """
    logger = LoggerService.get_logger("Init")
    config_repo = ConfigRepository()

    if not config_repo.create_example_config():
        return False

    logger.info("=" * 70)
    logger.info(f"Creado: {config_repo.config_file}")
    logger.info("Edita el archivo con tus datos y ejecuta nuevamente el programa")
    logger.info("=" * 70)
    return True


def main(argv=None):
    """Función principal"""
    args = parse_arguments(argv)

    try:
        LoggerService.enable_file_logging(Config.log_dir())
    except (ConfigError, OSError) as e:
        print(f"Aviso: log a archivo desactivado: {e}", file=sys.stderr)

    if args.init:
        initialize_config()
        return

    logger = LoggerService.get_logger("Main")
    logger.info("Iniciando el programa de backup")

    try:
        Config.load_env()
        config = ConfigRepository().get_config()
        result = BackupService(config).run()
    except BackupError as e:
        logger.critical(f"Backup abortado: {e}")
        sys.exit(1)

    logger.info(f"✓ Backup exitoso: {result}")


def run():
    """Entrada de consola: convierte cualquier fallo en código de salida"""
    try:
        main()
    except KeyboardInterrupt:
        print("\nPrograma interrumpido por el usuario")
        sys.exit(130)
    except Exception as e:
        print(f"Error crítico: {e}")
        traceback.print_exc()
        sys.exit(1)
