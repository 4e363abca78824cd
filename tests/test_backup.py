"""
Tests unitarios para modelos, configuración y factory
"""
import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

# Agregar raíz del proyecto al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dbk.config import Config
from dbk.exceptions import ConfigError
from dbk.factories.strategy_factory import RemoteStrategyFactory
from dbk.models import AppConfig, BackupSettings, RemoteConfig
from dbk.repositories.config_repository import ConfigRepository
from dbk.strategies.remote_strategy import KeyRemoteSyncStrategy, PasswordRemoteSyncStrategy


class TestModels(unittest.TestCase):
    """Tests para modelos de datos"""

    def test_remote_mode_key_takes_precedence(self):
        """Test clave privada y usuario: gana la clave"""
        remote = RemoteConfig(host="h", user="u", password="p", private_key="/k/id_rsa", dir="/d")
        self.assertEqual(remote.mode, "key")

    def test_remote_mode_password(self):
        """Test solo usuario: envío por contraseña"""
        remote = RemoteConfig(host="h", user="u", password="p")
        self.assertEqual(remote.mode, "password")

    def test_remote_mode_none(self):
        """Test sin clave ni usuario no hay envío"""
        self.assertIsNone(RemoteConfig(host="h", dir="/d").mode)

    def test_remote_mode_blank_values_are_ignored(self):
        """Test valores en blanco no seleccionan modo"""
        remote = RemoteConfig(user="   ", private_key="  \t")
        self.assertIsNone(remote.mode)

    def test_remote_destination(self):
        """Test formato user@host:dir"""
        remote = RemoteConfig(host="backup.local", user="bk", dir="/srv/bk")
        self.assertEqual(remote.destination, "bk@backup.local:/srv/bk")

    def test_password_hidden_from_repr(self):
        """Test la contraseña no aparece en repr"""
        remote = RemoteConfig(user="bk", password="s3cr3t")
        self.assertNotIn("s3cr3t", repr(remote))

    def test_backup_settings_defaults(self):
        """Test valores por defecto de BackupSettings"""
        settings = BackupSettings()
        self.assertEqual(settings.archive_mode, 0o777)
        self.assertTrue(settings.password_via_env)

    def test_backup_settings_mode_validation(self):
        """Test archive_mode fuera de rango"""
        with self.assertRaises(ValueError):
            BackupSettings(archive_mode=0o17777)
        with self.assertRaises(ValueError):
            BackupSettings(archive_mode=0o4755)


class TestConfig(unittest.TestCase):
    """Tests para la resolución de rutas junto al ejecutable"""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_config_file_beside_executable(self):
        """Test config.yaml en el directorio del ejecutable"""
        exe = self.temp_dir / "dbk"
        exe.write_text("")
        with patch.object(sys, 'argv', [str(exe)]):
            self.assertEqual(Config.config_file(), self.temp_dir.resolve() / "config.yaml")

    def test_log_dir_beside_executable(self):
        """Test los logs van a Logs/ junto al ejecutable"""
        exe = self.temp_dir / "dbk"
        exe.write_text("")
        with patch.object(sys, 'argv', [str(exe)]):
            self.assertEqual(Config.log_dir(), self.temp_dir.resolve() / "Logs")

    def test_executable_symlink_is_resolved(self):
        """Test se resuelven los enlaces simbólicos"""
        real_dir = self.temp_dir / "real"
        real_dir.mkdir()
        (real_dir / "dbk").write_text("")
        link = self.temp_dir / "dbk-link"
        link.symlink_to(real_dir / "dbk")
        with patch.object(sys, 'argv', [str(link)]):
            self.assertEqual(Config.executable_dir(), real_dir.resolve())

    def test_executable_unknown(self):
        """Test ruta del ejecutable indeterminable"""
        with patch.object(sys, 'argv', ['']):
            with self.assertRaises(ConfigError):
                Config.executable_dir()


class TestConfigRepository(unittest.TestCase):
    """Tests para ConfigRepository"""

    def setUp(self):
        """Setup para tests"""
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = Path(self.temp_dir) / "config.yaml"
        self.repo = ConfigRepository(self.config_file)

    def tearDown(self):
        """Cleanup después de tests"""
        if Path(self.temp_dir).exists():
            shutil.rmtree(self.temp_dir)

    def _write(self, content: str):
        self.config_file.write_text(content, encoding='utf-8')

    def test_load_nonexistent_config(self):
        """Test cargar configuración inexistente es fatal"""
        with self.assertRaises(ConfigError):
            self.repo.load()

    def test_load_invalid_yaml(self):
        """Test YAML mal formado"""
        self._write("mysql: [host: x\n")
        with self.assertRaises(ConfigError):
            self.repo.load()

    def test_load_non_mapping(self):
        """Test documento que no es un mapa"""
        self._write("- a\n- b\n")
        with self.assertRaises(ConfigError):
            self.repo.load()

    def test_section_must_be_mapping(self):
        """Test sección con forma incorrecta"""
        self._write("mysql: localhost\n")
        with self.assertRaises(ConfigError):
            self.repo.get_config()

    def test_full_config(self):
        """Test configuración completa"""
        self._write(
            "mysql:\n"
            "  host: db.local\n"
            "  port: 3306\n"
            "  user: root\n"
            "  password: pass\n"
            "  name: shop\n"
            "local:\n"
            "  dir: /tmp/bk\n"
            "remote:\n"
            "  host: remote.local\n"
            "  user: bk\n"
            "  password: rpass\n"
            "  privatekey: /root/.ssh/id_rsa\n"
            "  dir: /srv/bk\n"
            "file:\n"
            "  path: /var/www\n"
        )
        config = self.repo.get_config()

        self.assertIsInstance(config, AppConfig)
        self.assertEqual(config.mysql.host, "db.local")
        self.assertEqual(config.mysql.port, "3306")
        self.assertEqual(config.mysql.name, "shop")
        self.assertEqual(config.local.dir, "/tmp/bk")
        self.assertEqual(config.remote.private_key, "/root/.ssh/id_rsa")
        self.assertEqual(config.remote.mode, "key")
        self.assertEqual(config.file.path, "/var/www")
        self.assertEqual(config.backup, BackupSettings())

    def test_capitalized_sections_and_key_aliases(self):
        """Test secciones en mayúsculas y alias de private_key"""
        self._write(
            "Mysql:\n"
            "  Name: shop\n"
            "Remote:\n"
            "  private_key: /k\n"
        )
        config = self.repo.get_config()
        self.assertEqual(config.mysql.name, "shop")
        self.assertEqual(config.remote.private_key, "/k")

    def test_empty_file_gives_empty_values(self):
        """Test archivo vacío: sin valores por defecto inventados"""
        self._write("")
        config = self.repo.get_config()
        self.assertEqual(config.mysql.host, "")
        self.assertEqual(config.local.dir, "")
        self.assertIsNone(config.remote.mode)

    def test_credentials_from_environment(self):
        """Test referencias ${VAR} en credenciales"""
        self._write(
            "mysql:\n"
            "  password: ${DBK_TEST_DB_PASSWORD}\n"
            "remote:\n"
            "  user: ${DBK_TEST_MISSING_USER}\n"
            "  host: ${NOT_A_CREDENTIAL}\n"
        )
        with patch.dict(os.environ, {"DBK_TEST_DB_PASSWORD": "from-env"}):
            os.environ.pop("DBK_TEST_MISSING_USER", None)
            config = self.repo.get_config()

        self.assertEqual(config.mysql.password, "from-env")
        self.assertEqual(config.remote.user, "")
        self.assertEqual(config.remote.host, "${NOT_A_CREDENTIAL}")

    def test_backup_settings_section(self):
        """Test sección backup opcional"""
        self._write(
            "backup:\n"
            "  archive_mode: \"0640\"\n"
            "  password_via_env: false\n"
        )
        settings = self.repo.get_backup_settings()
        self.assertEqual(settings.archive_mode, 0o640)
        self.assertFalse(settings.password_via_env)

    def test_archive_mode_null_disables_chmod(self):
        """Test archive_mode null"""
        self._write("backup:\n  archive_mode: null\n")
        self.assertIsNone(self.repo.get_backup_settings().archive_mode)

    def test_archive_mode_invalid(self):
        """Test archive_mode inválido"""
        self._write("backup:\n  archive_mode: rwx\n")
        with self.assertRaises(ConfigError):
            self.repo.get_backup_settings()

    def test_archive_mode_unquoted_decimal_rejected(self):
        """Test 777 sin comillas es decimal (0o1411) y se rechaza"""
        self._write("backup:\n  archive_mode: 777\n")
        with self.assertRaises(ConfigError):
            self.repo.get_backup_settings()

    def test_archive_mode_unquoted_octal_literal(self):
        """Test 0755 sin comillas se interpreta como octal"""
        self._write("backup:\n  archive_mode: 0755\n")
        self.assertEqual(self.repo.get_backup_settings().archive_mode, 0o755)

    def test_password_via_env_must_be_bool(self):
        """Test password_via_env no booleano"""
        self._write("backup:\n  password_via_env: yes please\n")
        with self.assertRaises(ConfigError):
            self.repo.get_backup_settings()

    def test_create_example_config(self):
        """Test crear configuración de ejemplo"""
        self.assertTrue(self.repo.create_example_config())
        self.assertTrue(self.config_file.exists())

        config = ConfigRepository(self.config_file).get_config()
        self.assertEqual(config.mysql.name, "shop")
        self.assertEqual(config.backup.archive_mode, 0o777)

    def test_create_example_config_keeps_existing(self):
        """Test no sobrescribe una configuración existente"""
        self._write("mysql:\n  name: mine\n")
        self.assertFalse(self.repo.create_example_config())
        self.assertIn("mine", self.config_file.read_text(encoding='utf-8'))


class TestRemoteStrategyFactory(unittest.TestCase):
    """Tests para RemoteStrategyFactory"""

    def test_create_key_strategy(self):
        """Test clave y usuario configurados: estrategia por clave"""
        remote = RemoteConfig(host="h", user="u", password="p", private_key="/k", dir="/d")
        strategy = RemoteStrategyFactory.create(remote)
        self.assertIsInstance(strategy, KeyRemoteSyncStrategy)

    def test_create_password_strategy(self):
        """Test solo usuario: estrategia por contraseña"""
        settings = BackupSettings(password_via_env=False)
        strategy = RemoteStrategyFactory.create(RemoteConfig(user="u"), settings)
        self.assertIsInstance(strategy, PasswordRemoteSyncStrategy)
        self.assertFalse(strategy.settings.password_via_env)

    def test_create_without_remote(self):
        """Test sin envío remoto"""
        self.assertIsNone(RemoteStrategyFactory.create(RemoteConfig()))


if __name__ == '__main__':
    unittest.main()
