"""
Modelo de carril unidireccional con semáforo propio.

Un carril posee su semáforo y una lista ordenada de IDs de vehículos.
Los vehículos en sí viven en el registro del simulador; el carril solo
guarda sus identificadores.
"""

import logging
from typing import Dict, List, Optional

from .traffic_light import TrafficLight
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


class Lane:
    """
    Representa un tramo de calle de un solo sentido.

    En cada paso el carril actualiza primero su semáforo y luego mueve
    sus vehículos en orden de llegada, quitando los que alcanzaron el
    final.
    """

    def __init__(self, lane_id: int, length_m: float, speed_limit_kmh: float,
                 light: Optional[TrafficLight] = None):
        """
        Inicializa un carril.

        Args:
            lane_id: Identificador del carril
            length_m: Longitud en metros
            speed_limit_kmh: Límite de velocidad (no interviene en el movimiento)
            light: Semáforo del carril (por defecto uno estándar)

        Raises:
            ValueError: Si la longitud no es positiva
        """
        if length_m <= 0:
            raise ValueError(f"Longitud de carril inválida: {length_m}m")

        self.id = lane_id
        self.length_m = length_m
        self.speed_limit_kmh = speed_limit_kmh
        self.light = light if light is not None else TrafficLight()

        # IDs en orden de inserción
        self.vehicle_ids: List[int] = []

    def add_vehicle(self, vehicle: Vehicle):
        """Agrega un vehículo al final de la cola del carril."""
        self.vehicle_ids.append(vehicle.id)
        vehicle.lane_id = self.id

    def update(self, step: float, vehicles: Dict[int, Vehicle],
               current_time: float = 0.0) -> List[int]:
        """
        Avanza el carril un paso de simulación.

        Args:
            step: Paso de tiempo (segundos)
            vehicles: Registro de vehículos activos {id: Vehicle}
            current_time: Tiempo actual de simulación

        Returns:
            list: IDs de los vehículos que salieron en este paso
        """
        self.light.update(step)

        remaining = []
        exited = []

        for vehicle_id in self.vehicle_ids:
            vehicle = vehicles[vehicle_id]
            vehicle.move(step, self)

            if vehicle.has_left_lane(self.length_m):
                vehicle.mark_exited(current_time)
                exited.append(vehicle_id)
                logger.debug("Vehículo #%d salió del carril %d", vehicle_id, self.id)
            else:
                remaining.append(vehicle_id)

        self.vehicle_ids = remaining
        return exited

    def get_vehicles(self, vehicles: Dict[int, Vehicle]) -> List[Vehicle]:
        """Retorna los vehículos del carril en orden de inserción."""
        return [vehicles[vehicle_id] for vehicle_id in self.vehicle_ids]

    def get_occupancy(self) -> int:
        """Número de vehículos activos en el carril."""
        return len(self.vehicle_ids)

    def clear(self):
        """Quita todos los vehículos del carril."""
        self.vehicle_ids.clear()

    def __str__(self) -> str:
        return f"Lane({self.id}: {self.length_m:.0f}m)"

    def __repr__(self) -> str:
        return (f"Lane(id={self.id}, length={self.length_m}m, "
                f"speed_limit={self.speed_limit_kmh}km/h, "
                f"vehicles={len(self.vehicle_ids)})")
