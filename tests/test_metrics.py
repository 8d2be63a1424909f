"""
Tests para el cálculo de métricas (MetricsCalculator).
"""

import pytest
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from src.simulator import Vehicle, VehicleType
from src.utils.metrics import MetricsCalculator


HISTORY = [
    {'time': 1, 'occupancy': {1: 0, 2: 1}},
    {'time': 2, 'occupancy': {1: 2, 2: 1}},
    {'time': 3, 'occupancy': {1: 3, 2: 1}},
]


class TestMetricsCalculator:
    """Tests para la clase MetricsCalculator."""

    def test_empty_inputs(self):
        """Test de métricas sin datos."""
        calc = MetricsCalculator()

        assert calc.average_speed([]) == 0.0
        assert calc.average_travel_time([]) == 0.0
        assert calc.throughput([], 0) == 0.0
        assert calc.average_occupancy([]) == 0.0
        assert calc.max_occupancy([]) == 0

    def test_travel_time_and_throughput(self):
        """Test de tiempo de recorrido y throughput."""
        vehicles = []
        for vehicle_id, (spawn, exit_time) in enumerate([(0, 40), (10, 30)], start=1):
            vehicle = Vehicle(vehicle_id, VehicleType.CAR, 36.0, spawn_time=spawn)
            vehicle.mark_exited(exit_time)
            vehicles.append(vehicle)

        assert MetricsCalculator.average_travel_time(vehicles) == pytest.approx(30.0)
        assert MetricsCalculator.throughput(vehicles, 60) == pytest.approx(2.0)

    def test_stalled_vehicles(self):
        """Test de conteo de vehículos detenidos."""
        moving = Vehicle(1, VehicleType.CAR, 30.0)
        stalled = Vehicle(2, VehicleType.BUS, 0.0)

        assert MetricsCalculator.stalled_vehicles([moving, stalled]) == 1

    def test_occupancy(self):
        """Test de ocupación promedio y máxima."""
        assert MetricsCalculator.average_occupancy(HISTORY) == pytest.approx(8 / 6)
        assert MetricsCalculator.max_occupancy(HISTORY) == 3

    def test_occupancy_dataframe(self):
        """Test de conversión a DataFrame."""
        df = MetricsCalculator.occupancy_dataframe(HISTORY)

        assert list(df.columns) == ["lane_1", "lane_2"]
        assert list(df.index) == [1, 2, 3]
        assert df.loc[3, "lane_1"] == 3

    def test_summary_dataframe(self):
        """Test de tabla comparativa ordenada por throughput."""
        results = {
            'a': {'vehicles_completed': 2, 'throughput_per_minute': 2.0},
            'b': {'vehicles_completed': 5, 'throughput_per_minute': 5.0},
        }

        df = MetricsCalculator.create_summary_dataframe(results)

        assert list(df['Run']) == ['b', 'a']

    def test_plot_lane_occupancy(self):
        """Test de gráfico de ocupación."""
        fig = MetricsCalculator.plot_lane_occupancy(HISTORY)

        assert isinstance(fig, plt.Figure)
        assert len(fig.axes[0].lines) == 2
        plt.close(fig)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
