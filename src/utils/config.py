"""
Configuración global del simulador de carriles.

Este módulo contiene todas las constantes y parámetros de configuración
utilizados en el proyecto, además de la configuración del logging.
"""

import logging
from pathlib import Path

# Rutas del proyecto
PROJECT_ROOT = Path(__file__).parent.parent.parent
RESULTS_DIR = PROJECT_ROOT / "experiments" / "results"


# Parámetros del simulador
class SimulatorConfig:
    """Configuración del simulador de tráfico."""

    # Tiempo
    TIME_STEP = 1  # Paso de simulación en segundos
    SIMULATION_DURATION = 60  # 1 minuto (límite fijo)

    # Generación de vehículos
    SPAWN_PROBABILITY = 0.3  # Probabilidad de generar un vehículo por paso
    MIN_SPEED_KMH = 20.0
    MAX_SPEED_KMH = 50.0

    # Línea de detención
    STOP_LINE_DISTANCE = 10.0  # metros antes del final del carril


# Parámetros de semáforos
class TrafficLightConfig:
    """Configuración de semáforos."""

    GREEN_TIME = 10  # segundos
    YELLOW_TIME = 3  # segundos
    RED_TIME = 7  # segundos


# Carriles por defecto
class LaneConfig:
    """Configuración de carriles."""

    # (id, longitud en metros, límite de velocidad en km/h)
    DEFAULT_LANES = [
        (1, 500.0, 50.0),
        (2, 600.0, 40.0),
    ]


# Visualización
class VisualizationConfig:
    """Configuración de visualización."""

    TRACK_WIDTH = 50  # caracteres
    TRACK_CHAR = "-"
    FRAME_DELAY = 0.5  # segundos entre cuadros

    FIGURE_SIZE = (12, 6)
    DPI = 100

    LIGHT_SYMBOLS = {
        "green": "🟢",
        "yellow": "🟡",
        "red": "🔴",
    }


# Logging
class LoggingConfig:
    """Configuración de logging."""

    LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = LoggingConfig.LOG_LEVEL):
    """
    Configura el logging raíz del proyecto.

    Args:
        level: Nivel de logging ("DEBUG", "INFO", ...)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LoggingConfig.LOG_FORMAT,
        datefmt=LoggingConfig.DATE_FORMAT,
    )


def ensure_directories():
    """Crea los directorios necesarios si no existen."""
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":
    print(f"Directorio del proyecto: {PROJECT_ROOT}")
    print(f"Directorio de resultados: {RESULTS_DIR}")
    ensure_directories()
    print("Directorios verificados/creados correctamente")
