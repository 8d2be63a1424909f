"""
Script de ejemplo: Simulación de carriles en la terminal.

Ejecuta un minuto de simulación, redibujando los carriles en cada paso,
y termina con un mensaje de cierre.
"""

import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.simulator import TrafficSimulator
from src.utils.config import setup_logging


def main():
    """Función principal del ejemplo."""
    setup_logging("WARNING")

    simulator = TrafficSimulator()
    simulator.run(render=True)

    print("Simulation ended.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
