#!/usr/bin/env python3
"""
Backup de MySQL y archivos con envío remoto por rsync
Punto de entrada principal

Uso:
    python main.py             # Ejecutar el backup (lee config.yaml junto a este archivo)
    python main.py --init      # Crear config.yaml de ejemplo
    python main.py --help      # Ayuda
"""
from dbk.cli import run


if __name__ == "__main__":
    run()
