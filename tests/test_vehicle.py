"""
Tests para el módulo de vehículos (Vehicle).
"""

import pytest
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.simulator.vehicle import Vehicle, VehicleType, VehicleState
from src.simulator.traffic_light import TrafficLight, LightState
from src.simulator.lane import Lane


def make_lane(state: LightState, length: float = 100.0) -> Lane:
    """Carril de prueba con el semáforo en el estado dado."""
    return Lane(1, length, 50.0, TrafficLight(initial_state=state))


class TestVehicle:
    """Tests para la clase Vehicle."""

    def test_vehicle_creation(self):
        """Test de creación básica de vehículo."""
        vehicle = Vehicle(7, VehicleType.BUS, 30.0, spawn_time=4)

        assert vehicle.id == 7
        assert vehicle.vehicle_type == VehicleType.BUS
        assert vehicle.speed_kmh == 30.0
        assert vehicle.position == 0.0
        assert vehicle.lane_id is None
        assert vehicle.state == VehicleState.MOVING

    def test_symbols(self):
        """Test de símbolos por tipo."""
        symbols = {t: Vehicle(1, t, 20.0).symbol for t in VehicleType}

        assert symbols == {
            VehicleType.CAR: "C",
            VehicleType.BUS: "B",
            VehicleType.TRUCK: "T",
            VehicleType.MOTORCYCLE: "M"
        }

    def test_speed_conversion(self):
        """Test de conversión km/h a m/s."""
        vehicle = Vehicle(1, VehicleType.CAR, 36.0)

        assert vehicle.speed_ms == pytest.approx(10.0)

    def test_movement_on_green(self):
        """Test de movimiento básico con luz verde."""
        lane = make_lane(LightState.GREEN)
        vehicle = Vehicle(1, VehicleType.CAR, 36.0)

        vehicle.move(1, lane)

        assert vehicle.position == pytest.approx(10.0)
        assert vehicle.distance_traveled == pytest.approx(10.0)

    def test_stop_line_freeze_on_red(self):
        """Test: con rojo, el vehículo que cruzaría la línea se congela."""
        lane = make_lane(LightState.RED)
        vehicle = Vehicle(1, VehicleType.CAR, 36.0)
        vehicle.position = lane.length_m - 11

        vehicle.move(1, lane)

        assert vehicle.speed_kmh == 0
        assert vehicle.position == lane.length_m - 11
        assert vehicle.state == VehicleState.STOPPED_AT_LIGHT
        assert vehicle.num_stops == 1

    def test_stop_line_freeze_on_yellow(self):
        """Test: el amarillo también detiene al vehículo."""
        lane = make_lane(LightState.YELLOW)
        vehicle = Vehicle(1, VehicleType.TRUCK, 36.0)
        vehicle.position = 85.0

        vehicle.move(1, lane)

        assert vehicle.speed_kmh == 0
        assert vehicle.position == 85.0

    def test_crosses_stop_line_on_green(self):
        """Test: con verde cruza la línea de detención."""
        lane = make_lane(LightState.GREEN)
        vehicle = Vehicle(1, VehicleType.CAR, 36.0)
        vehicle.position = 89.0

        vehicle.move(1, lane)

        assert vehicle.position == pytest.approx(99.0)
        assert vehicle.speed_kmh == 36.0

    def test_past_stop_line_keeps_moving_on_red(self):
        """Test: un vehículo ya pasada la línea sigue con rojo."""
        lane = make_lane(LightState.RED)
        vehicle = Vehicle(1, VehicleType.MOTORCYCLE, 36.0)
        vehicle.position = 90.0

        vehicle.move(1, lane)

        assert vehicle.position == pytest.approx(100.0)

    def test_not_reaching_stop_line_moves_on_red(self):
        """Test: con rojo, avanza mientras no alcance la línea."""
        lane = make_lane(LightState.RED)
        vehicle = Vehicle(1, VehicleType.CAR, 36.0)
        vehicle.position = 50.0

        vehicle.move(1, lane)

        assert vehicle.position == pytest.approx(60.0)

    def test_stopped_vehicle_never_resumes(self):
        """Test: detenido en la línea, no arranca aunque vuelva el verde."""
        lane = make_lane(LightState.RED)
        vehicle = Vehicle(1, VehicleType.CAR, 36.0)
        vehicle.position = 89.0

        vehicle.move(1, lane)
        lane.light.reset(LightState.GREEN)

        for _ in range(10):
            vehicle.move(1, lane)

        assert vehicle.position == 89.0
        assert vehicle.speed_kmh == 0
        assert vehicle.is_stalled()
        assert vehicle.num_stops == 1
        assert vehicle.total_waiting_time == pytest.approx(11.0)

    def test_position_non_decreasing(self):
        """Test: la posición nunca disminuye."""
        lane = make_lane(LightState.GREEN, length=500.0)
        vehicle = Vehicle(1, VehicleType.CAR, 45.0)

        positions = []
        for _ in range(30):
            lane.light.update(1)
            vehicle.move(1, lane)
            positions.append(vehicle.position)

        assert all(b >= a for a, b in zip(positions, positions[1:]))

    def test_exit_marking(self):
        """Test de marca de salida."""
        vehicle = Vehicle(1, VehicleType.CAR, 36.0, spawn_time=5)
        vehicle.position = 120.0

        assert vehicle.has_left_lane(100.0)

        vehicle.mark_exited(current_time=20)

        assert vehicle.has_exited()
        assert vehicle.get_travel_time(current_time=50) == 15

    def test_statistics_dict(self):
        """Test de diccionario de estadísticas."""
        vehicle = Vehicle(3, VehicleType.CAR, 25.0)

        stats = vehicle.get_statistics()

        assert stats['vehicle_id'] == 3
        assert stats['type'] == "CAR"
        assert stats['exited'] is False
        assert 'num_stops' in stats


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
