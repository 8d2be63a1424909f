"""
Representación en texto del estado de la simulación.
"""

import os
from typing import Dict, List

from src.utils.config import VisualizationConfig
from .lane import Lane
from .vehicle import Vehicle


class TextRenderer:
    """
    Dibuja cada carril como una pista de ancho fijo.

    Los vehículos se ubican en proporción a position/length; si dos caen
    en la misma celda, el último sobrescribe al anterior.
    """

    def __init__(self, track_width: int = VisualizationConfig.TRACK_WIDTH,
                 track_char: str = VisualizationConfig.TRACK_CHAR):
        if track_width < 1:
            raise ValueError(f"Ancho de pista inválido: {track_width}")
        self.track_width = track_width
        self.track_char = track_char

    def cell_for(self, position: float, length: float) -> int:
        """Celda de la pista para una posición, acotada a [0, ancho-1]."""
        cell = int((position / length) * self.track_width)
        return max(0, min(cell, self.track_width - 1))

    def render_lane(self, lane: Lane, vehicles: Dict[int, Vehicle]) -> str:
        """
        Construye la pista de un carril.

        Args:
            lane: Carril a dibujar
            vehicles: Registro de vehículos activos

        Returns:
            str: Pista de track_width caracteres
        """
        road: List[str] = [self.track_char] * self.track_width
        for vehicle in lane.get_vehicles(vehicles):
            road[self.cell_for(vehicle.position, lane.length_m)] = vehicle.symbol
        return "".join(road)

    def render(self, simulator) -> str:
        """
        Construye el cuadro completo de la simulación.

        Args:
            simulator: Instancia de TrafficSimulator

        Returns:
            str: Texto del cuadro
        """
        lines = [f"Simulation Time: {simulator.current_time:g}s"]
        for lane in simulator.lanes:
            lines.append(f"Lane {lane.id} [Light: {lane.light.get_symbol()}]")
            lines.append(f"  {self.render_lane(lane, simulator.vehicles)}")
            lines.append("")
        return "\n".join(lines)

    @staticmethod
    def clear_screen():
        os.system("cls" if os.name == "nt" else "clear")

    def display(self, simulator):
        """Limpia la terminal e imprime el cuadro actual."""
        self.clear_screen()
        print(self.render(simulator))
