"""
Motor principal de simulación de carriles.

Este módulo implementa el simulador que coordina todos los componentes:
carriles, semáforos, vehículos, generación de tráfico y visualización.
"""

from typing import Dict, List, Optional, Sequence
import logging
import time as timer

from src.utils.config import SimulatorConfig, LaneConfig, VisualizationConfig
from src.utils.metrics import MetricsCalculator
from .lane import Lane
from .vehicle import Vehicle
from .traffic_generator import TrafficGenerator
from .renderer import TextRenderer

logger = logging.getLogger(__name__)


class TrafficSimulator:
    """
    Motor principal de simulación de tráfico.

    Es el único dueño de los vehículos: el registro `vehicles` guarda
    los activos por ID y los carriles solo referencian esos IDs.
    """

    def __init__(self, lanes: Optional[Sequence[Lane]] = None,
                 dt: int = SimulatorConfig.TIME_STEP,
                 seed: Optional[int] = None):
        """
        Inicializa el simulador.

        Args:
            lanes: Carriles a simular (por defecto, los de LaneConfig)
            dt: Paso de tiempo en segundos
            seed: Semilla del generador aleatorio (opcional)

        Raises:
            ValueError: Si el paso de tiempo no es positivo
        """
        if dt <= 0:
            raise ValueError(f"Paso de tiempo inválido: {dt}")

        self.lanes: List[Lane] = []
        if lanes is None:
            self.setup()
        else:
            self.lanes = list(lanes)

        if not self.lanes:
            raise ValueError("La simulación necesita al menos un carril")

        # Registro canónico de vehículos activos
        self.vehicles: Dict[int, Vehicle] = {}
        self.completed_vehicles: List[Vehicle] = []

        self.traffic_generator = TrafficGenerator(len(self.lanes), seed=seed)

        # Estado de simulación
        self.current_time = 0
        self.dt = dt

        # Métricas en tiempo real
        self.occupancy_history: List[dict] = []

        self.real_time_start = None

        logger.info("Simulador inicializado: %d carriles", len(self.lanes))

    def setup(self):
        """Crea los carriles por defecto."""
        self.lanes = [
            Lane(lane_id, length, speed_limit)
            for lane_id, length, speed_limit in LaneConfig.DEFAULT_LANES
        ]

    def is_running(self) -> bool:
        """La simulación termina al alcanzar la duración fija."""
        return self.current_time < SimulatorConfig.SIMULATION_DURATION

    def step(self):
        """
        Ejecuta un paso de simulación.

        Orden: avance del tiempo, generación, carriles (semáforo y luego
        vehículos), métricas.
        """
        # 1. Avanzar tiempo
        self.current_time += self.dt

        # 2. Generar nuevo vehículo
        self._spawn_vehicles()

        # 3. Actualizar carriles en orden fijo
        self._update_lanes()

        # 4. Registrar métricas instantáneas
        self._record_metrics()

    def _spawn_vehicles(self):
        """Genera como máximo un vehículo en un carril aleatorio."""
        if not self.traffic_generator.should_spawn_vehicle():
            return

        vehicle = self.traffic_generator.generate_vehicle(self.current_time)
        lane = self.lanes[self.traffic_generator.choose_lane_index()]
        self.add_vehicle(vehicle, lane.id)

    def add_vehicle(self, vehicle: Vehicle, lane_id: int):
        """
        Registra un vehículo y lo agrega a un carril.

        Args:
            vehicle: Vehículo a agregar
            lane_id: ID del carril destino

        Raises:
            ValueError: Si el ID ya está registrado
            KeyError: Si el carril no existe
        """
        if vehicle.id in self.vehicles:
            raise ValueError(f"Vehículo #{vehicle.id} ya registrado")

        lane = self.get_lane(lane_id)
        self.vehicles[vehicle.id] = vehicle
        lane.add_vehicle(vehicle)

    def remove_vehicle(self, vehicle_id: int) -> Vehicle:
        """
        Quita un vehículo del registro y de su carril a la vez.

        Args:
            vehicle_id: ID del vehículo a quitar

        Returns:
            Vehicle: El vehículo removido

        Raises:
            KeyError: Si el vehículo no está registrado
        """
        vehicle = self.vehicles.pop(vehicle_id)
        self.get_lane(vehicle.lane_id).vehicle_ids.remove(vehicle_id)
        return vehicle

    def get_lane(self, lane_id: int) -> Lane:
        """Retorna el carril con el ID dado."""
        for lane in self.lanes:
            if lane.id == lane_id:
                return lane
        raise KeyError(f"Carril no encontrado: {lane_id}")

    def _update_lanes(self):
        """Actualiza todos los carriles y retira los vehículos que salieron."""
        for lane in self.lanes:
            exited = lane.update(self.dt, self.vehicles, self.current_time)
            for vehicle_id in exited:
                self.completed_vehicles.append(self.vehicles.pop(vehicle_id))

    def _record_metrics(self):
        """Registra la ocupación de cada carril."""
        self.occupancy_history.append({
            'time': self.current_time,
            'occupancy': {lane.id: lane.get_occupancy() for lane in self.lanes}
        })

    def run(self, render: bool = True,
            frame_delay: float = VisualizationConfig.FRAME_DELAY,
            renderer: Optional[TextRenderer] = None) -> Dict:
        """
        Ejecuta la simulación hasta la duración fija.

        Args:
            render: Si True, dibuja cada cuadro en la terminal
            frame_delay: Pausa entre cuadros (segundos)
            renderer: Renderizador a usar (por defecto TextRenderer)

        Returns:
            dict: Métricas finales de la simulación
        """
        logger.info("Iniciando simulación: %ss", SimulatorConfig.SIMULATION_DURATION)

        self.reset()
        self.real_time_start = timer.time()
        renderer = renderer or TextRenderer()

        while self.is_running():
            self.step()
            if render:
                renderer.display(self)
            if frame_delay > 0:
                timer.sleep(frame_delay)

        metrics = self.calculate_final_metrics()
        logger.info("Simulación completada: %d generados, %d salieron",
                    metrics['vehicles_generated'], metrics['vehicles_completed'])
        return metrics

    def calculate_final_metrics(self) -> Dict:
        """
        Calcula métricas finales de la simulación.

        Returns:
            dict: Diccionario con todas las métricas
        """
        computation_time = 0.0
        if self.real_time_start:
            computation_time = timer.time() - self.real_time_start

        calc = MetricsCalculator
        active = list(self.vehicles.values())

        return {
            'simulation_time': self.current_time,
            'vehicles_generated': self.traffic_generator.total_vehicles_generated,
            'vehicles_completed': len(self.completed_vehicles),
            'vehicles_active': len(active),
            'vehicles_stalled': calc.stalled_vehicles(active),
            'throughput_per_minute': calc.throughput(self.completed_vehicles, self.current_time),
            'avg_travel_time': calc.average_travel_time(self.completed_vehicles),
            'avg_speed_kmh': calc.average_speed(self.completed_vehicles + active),
            'avg_occupancy': calc.average_occupancy(self.occupancy_history),
            'max_occupancy': calc.max_occupancy(self.occupancy_history),
            'computation_time': computation_time
        }

    def reset(self):
        """Reinicia el simulador al estado inicial."""
        self.current_time = 0
        self.vehicles.clear()
        self.completed_vehicles.clear()
        self.occupancy_history.clear()
        self.real_time_start = None

        self.traffic_generator.reset()

        for lane in self.lanes:
            lane.clear()
            lane.light.reset()

    def get_current_state(self) -> Dict:
        """
        Retorna el estado actual completo de la simulación.

        Returns:
            dict: Estado actual
        """
        return {
            'time': self.current_time,
            'active_vehicles': len(self.vehicles),
            'completed_vehicles': len(self.completed_vehicles),
            'lanes': {
                lane.id: {
                    'light': lane.light.get_state().value,
                    'time_in_state': lane.light.timer,
                    'vehicles': list(lane.vehicle_ids)
                }
                for lane in self.lanes
            }
        }
