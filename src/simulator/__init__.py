"""
Simulador de tráfico en carriles.

Este módulo contiene el motor de simulación que modela:
- Semáforos de tres estados por carril
- Movimiento de vehículos y línea de detención
- Generación aleatoria de vehículos
- Visualización en texto
"""

from .traffic_light import TrafficLight, LightState
from .vehicle import Vehicle, VehicleType, VehicleState
from .lane import Lane
from .traffic_generator import TrafficGenerator
from .renderer import TextRenderer
from .traffic_simulator import TrafficSimulator

__all__ = [
    'TrafficLight',
    'LightState',
    'Vehicle',
    'VehicleType',
    'VehicleState',
    'Lane',
    'TrafficGenerator',
    'TextRenderer',
    'TrafficSimulator'
]
