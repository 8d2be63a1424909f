"""
Modelo de vehículo que avanza a lo largo de un carril.

Este módulo implementa el movimiento de un vehículo individual a velocidad
constante, la regla de detención frente a la línea de parada, y las
estadísticas de su recorrido.
"""

from typing import Optional
from enum import Enum

from src.utils.config import SimulatorConfig


class VehicleType(Enum):
    """Tipos de vehículo y su símbolo en pantalla."""
    CAR = "C"
    BUS = "B"
    TRUCK = "T"
    MOTORCYCLE = "M"


class VehicleState(Enum):
    """Estados posibles de un vehículo."""
    MOVING = "moving"              # Moviéndose normalmente
    STOPPED_AT_LIGHT = "stopped"   # Detenido en la línea de parada
    EXITED = "exited"              # Salió del carril


class Vehicle:
    """
    Representa un vehículo individual en la simulación.

    El vehículo avanza a velocidad constante. Si el semáforo de su carril
    no está en verde y el próximo paso cruzaría la línea de detención,
    su velocidad pasa a cero y no vuelve a moverse.
    """

    def __init__(self, vehicle_id: int, vehicle_type: VehicleType,
                 speed_kmh: float, spawn_time: float = 0.0):
        """
        Inicializa un vehículo.

        Args:
            vehicle_id: Identificador único
            vehicle_type: Tipo de vehículo
            speed_kmh: Velocidad en km/h
            spawn_time: Tiempo de generación del vehículo (segundos)
        """
        self.id = vehicle_id
        self.vehicle_type = vehicle_type
        self.speed_kmh = speed_kmh
        self.position = 0.0  # Metros desde el inicio del carril

        # Referencia (no propietaria) al carril actual
        self.lane_id: Optional[int] = None

        # Estado
        self.state = VehicleState.MOVING
        self.spawn_time = spawn_time
        self.exit_time: Optional[float] = None

        # Estadísticas
        self.distance_traveled = 0.0
        self.num_stops = 0
        self.total_waiting_time = 0.0

    @property
    def speed_ms(self) -> float:
        """Velocidad actual en m/s."""
        return self.speed_kmh * 1000.0 / 3600.0

    @property
    def symbol(self) -> str:
        """Símbolo de un carácter para la pista."""
        return self.vehicle_type.value

    def move(self, step: float, lane):
        """
        Avanza el vehículo un paso de simulación.

        Args:
            step: Paso de tiempo (segundos)
            lane: Carril que ocupa el vehículo
        """
        if self.has_exited():
            return

        next_position = self.position + self.speed_ms * step
        stop_line = lane.length_m - SimulatorConfig.STOP_LINE_DISTANCE

        if (not lane.light.can_vehicle_pass() and
                self.position < stop_line <= next_position):
            # Se congela en su posición actual
            self.speed_kmh = 0.0
            if self.state != VehicleState.STOPPED_AT_LIGHT:
                self.num_stops += 1
            self.state = VehicleState.STOPPED_AT_LIGHT
            self.total_waiting_time += step
            return

        if self.speed_kmh == 0:
            self.total_waiting_time += step

        self.distance_traveled += next_position - self.position
        self.position = next_position

    def has_left_lane(self, lane_length: float) -> bool:
        """Verifica si la posición alcanzó el final del carril."""
        return self.position >= lane_length

    def mark_exited(self, current_time: float):
        """
        Marca el vehículo como fuera del carril.

        Args:
            current_time: Tiempo de simulación en que salió
        """
        self.state = VehicleState.EXITED
        self.exit_time = current_time

    def has_exited(self) -> bool:
        """Verifica si el vehículo salió del carril."""
        return self.state == VehicleState.EXITED

    def is_stalled(self) -> bool:
        """Un vehículo detenido en la línea no vuelve a arrancar."""
        return self.speed_kmh == 0 and not self.has_exited()

    def get_travel_time(self, current_time: float) -> float:
        """
        Calcula el tiempo total de viaje.

        Args:
            current_time: Tiempo actual de simulación

        Returns:
            float: Tiempo de viaje en segundos
        """
        if self.has_exited() and self.exit_time is not None:
            return self.exit_time - self.spawn_time
        return current_time - self.spawn_time

    def get_statistics(self) -> dict:
        """
        Retorna un diccionario con las estadísticas del vehículo.

        Returns:
            dict: Estadísticas completas
        """
        return {
            'vehicle_id': self.id,
            'type': self.vehicle_type.name,
            'lane_id': self.lane_id,
            'speed_kmh': self.speed_kmh,
            'position': self.position,
            'spawn_time': self.spawn_time,
            'exit_time': self.exit_time,
            'distance_traveled': self.distance_traveled,
            'total_waiting_time': self.total_waiting_time,
            'num_stops': self.num_stops,
            'exited': self.has_exited()
        }

    def __str__(self) -> str:
        return f"Vehicle(#{self.id}, {self.vehicle_type.name})"

    def __repr__(self) -> str:
        return (f"Vehicle(id={self.id}, type={self.vehicle_type.name}, "
                f"lane={self.lane_id}, pos={self.position:.2f}m, "
                f"speed={self.speed_kmh:.2f}km/h)")
