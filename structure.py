"""
dbk/
│
├── dbk/
│   ├── __init__.py
│   ├── __main__.py               # python -m dbk
│   ├── cli.py                    # Argumentos y códigos de salida
│   ├── config.py                 # Constantes y rutas junto al ejecutable
│   ├── exceptions.py             # Jerarquía de errores fatales
│   ├── logger.py                 # Servicio de logging
│   ├── models.py                 # Modelos de datos
│   ├── repositories/
│   │   ├── __init__.py
│   │   └── config_repository.py  # Lectura de config.yaml
│   ├── strategies/
│   │   ├── __init__.py
│   │   ├── base_strategy.py      # Ejecución de herramientas externas
│   │   ├── mysql_strategy.py     # mysqldump
│   │   ├── rsync_strategy.py     # Copia del árbol de archivos
│   │   ├── tar_strategy.py       # Compresión .tar.gz
│   │   └── remote_strategy.py    # Envío por clave o por contraseña
│   ├── services/
│   │   ├── __init__.py
│   │   ├── backup_service.py     # Orquestación del proceso
│   │   ├── staging_service.py    # Directorio con marca de tiempo
│   │   └── cleanup_service.py    # Vaciado de la raíz local
│   └── factories/
│       ├── __init__.py
│       └── strategy_factory.py   # Selección del envío remoto
│
├── tests/
│   ├── __init__.py
│   ├── test_backup.py            # Modelos, configuración y factory
│   ├── test_strategies.py        # Estrategias
│   └── test_services.py          # Servicios y punto de entrada
│
├── main.py                       # Punto de entrada
├── pyproject.toml
├── .env.example
├── .gitignore
├── config.yaml.example
└── README.md
"""
