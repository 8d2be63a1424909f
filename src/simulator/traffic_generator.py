"""
Generador de vehículos para los carriles de la simulación.

Este módulo implementa la generación probabilística de vehículos: en cada
paso se genera como máximo uno, con tipo, velocidad y carril uniformes.
El estado aleatorio vive en un generador de numpy propio, no global.
"""

import logging
from typing import Dict, Optional

import numpy as np

from src.utils.config import SimulatorConfig
from .vehicle import Vehicle, VehicleType

logger = logging.getLogger(__name__)


class TrafficGenerator:
    """
    Genera vehículos de manera aleatoria.

    Cada llamada a should_spawn_vehicle realiza un sorteo uniforme; si
    resulta favorable, generate_vehicle crea un vehículo con el próximo
    ID disponible.
    """

    def __init__(self, num_lanes: int,
                 spawn_probability: float = SimulatorConfig.SPAWN_PROBABILITY,
                 min_speed_kmh: float = SimulatorConfig.MIN_SPEED_KMH,
                 max_speed_kmh: float = SimulatorConfig.MAX_SPEED_KMH,
                 seed: Optional[int] = None):
        """
        Inicializa el generador de tráfico.

        Args:
            num_lanes: Cantidad de carriles entre los que elegir
            spawn_probability: Probabilidad de generar un vehículo por paso
            min_speed_kmh: Velocidad mínima (km/h)
            max_speed_kmh: Velocidad máxima (km/h)
            seed: Semilla para reproducibilidad (opcional)

        Raises:
            ValueError: Si los parámetros no son válidos
        """
        if num_lanes < 1:
            raise ValueError("Debe haber al menos un carril")
        if not 0.0 <= spawn_probability <= 1.0:
            raise ValueError(f"Probabilidad inválida: {spawn_probability}")
        if min_speed_kmh > max_speed_kmh:
            raise ValueError(
                f"Rango de velocidad inválido: [{min_speed_kmh}, {max_speed_kmh}]")

        self.num_lanes = num_lanes
        self.spawn_probability = spawn_probability
        self.min_speed_kmh = min_speed_kmh
        self.max_speed_kmh = max_speed_kmh

        self.random_seed = seed
        self.rng = np.random.default_rng(seed)

        # Control de generación
        self.next_id = 1
        self.total_vehicles_generated = 0
        self.vehicles_per_type: Dict[VehicleType, int] = {t: 0 for t in VehicleType}

    def set_random_seed(self, seed: int):
        """
        Establece semilla para reproducibilidad.

        Args:
            seed: Semilla para el generador aleatorio
        """
        self.random_seed = seed
        self.rng = np.random.default_rng(seed)

    def should_spawn_vehicle(self) -> bool:
        """Sorteo uniforme: True si debe generarse un vehículo en este paso."""
        return self.rng.random() < self.spawn_probability

    def choose_lane_index(self) -> int:
        """Elige un índice de carril de manera uniforme."""
        return int(self.rng.integers(0, self.num_lanes))

    def generate_vehicle(self, current_time: float) -> Vehicle:
        """
        Genera un nuevo vehículo.

        Args:
            current_time: Tiempo actual de simulación

        Returns:
            Vehicle: Nuevo vehículo con ID único
        """
        types = list(VehicleType)
        vehicle_type = types[int(self.rng.integers(0, len(types)))]
        speed = float(self.rng.uniform(self.min_speed_kmh, self.max_speed_kmh))

        vehicle = Vehicle(
            vehicle_id=self.next_id,
            vehicle_type=vehicle_type,
            speed_kmh=speed,
            spawn_time=current_time
        )

        self.next_id += 1
        self.total_vehicles_generated += 1
        self.vehicles_per_type[vehicle_type] += 1

        logger.debug("Generado %s a %.1f km/h", vehicle, speed)

        return vehicle

    def get_spawn_statistics(self, current_time: float) -> Dict:
        """
        Retorna estadísticas de generación de vehículos.

        Args:
            current_time: Tiempo actual de simulación

        Returns:
            dict: Estadísticas de generación
        """
        if current_time > 0:
            actual_rate = self.total_vehicles_generated / current_time
        else:
            actual_rate = 0.0

        return {
            'total_generated': self.total_vehicles_generated,
            'target_rate_per_step': self.spawn_probability,
            'actual_rate_per_second': actual_rate,
            'per_type': {t.name: n for t, n in self.vehicles_per_type.items()}
        }

    def reset(self):
        """Reinicia el generador (el contador de IDs y la semilla)."""
        self.rng = np.random.default_rng(self.random_seed)
        self.next_id = 1
        self.total_vehicles_generated = 0
        self.vehicles_per_type = {t: 0 for t in VehicleType}


if __name__ == "__main__":
    print("="*70)
    print("EJEMPLO: Generador de Vehículos")
    print("="*70)

    generator = TrafficGenerator(num_lanes=2, seed=42)

    for t in range(1, 21):
        if generator.should_spawn_vehicle():
            vehicle = generator.generate_vehicle(current_time=t)
            lane_index = generator.choose_lane_index()
            print(f"T={t:3d}s: Generado {vehicle!r} -> carril índice {lane_index}")

    print(f"\nEstadísticas: {generator.get_spawn_statistics(current_time=20)}")
