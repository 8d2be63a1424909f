"""
Modelo de semáforo de tres estados controlado por temporizador.

Este módulo implementa un semáforo cíclico VERDE → AMARILLO → ROJO → VERDE,
con una duración fija para cada estado.
"""

import logging
from typing import Dict, List, Optional
from enum import Enum

from src.utils.config import TrafficLightConfig, VisualizationConfig

logger = logging.getLogger(__name__)


class LightState(Enum):
    """Estados posibles de un semáforo."""
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


# Transiciones válidas (cíclicas, no hay otras)
NEXT_STATE = {
    LightState.GREEN: LightState.YELLOW,
    LightState.YELLOW: LightState.RED,
    LightState.RED: LightState.GREEN,
}


class TrafficLight:
    """
    Representa el semáforo al final de un carril.

    El semáforo acumula tiempo en su estado actual y, cuando alcanza la
    duración configurada, pasa al siguiente estado del ciclo. El tiempo
    excedente se descarta.
    """

    def __init__(self, green_time: int = TrafficLightConfig.GREEN_TIME,
                 yellow_time: int = TrafficLightConfig.YELLOW_TIME,
                 red_time: int = TrafficLightConfig.RED_TIME,
                 initial_state: LightState = LightState.RED):
        """
        Inicializa un semáforo.

        Args:
            green_time: Duración del verde en segundos
            yellow_time: Duración del amarillo en segundos
            red_time: Duración del rojo en segundos
            initial_state: Estado inicial del ciclo

        Raises:
            ValueError: Si alguna duración no es positiva
        """
        self.durations: Dict[LightState, int] = {
            LightState.GREEN: green_time,
            LightState.YELLOW: yellow_time,
            LightState.RED: red_time,
        }

        # Validación
        for state, duration in self.durations.items():
            if duration <= 0:
                raise ValueError(
                    f"Duración de {state.value} inválida: {duration}s (debe ser > 0)")

        self.initial_state = initial_state
        self.state = initial_state
        self.timer = 0

        # Estadísticas
        self.total_cycles_completed = 0
        self.state_change_history: List[dict] = []

    @property
    def green_time(self) -> int:
        return self.durations[LightState.GREEN]

    @property
    def yellow_time(self) -> int:
        return self.durations[LightState.YELLOW]

    @property
    def red_time(self) -> int:
        return self.durations[LightState.RED]

    def update(self, step: int):
        """
        Avanza el temporizador del semáforo.

        Args:
            step: Paso de tiempo (segundos)
        """
        self.timer += step

        if self.timer >= self.durations[self.state]:
            previous = self.state
            self.state = NEXT_STATE[self.state]
            self.timer = 0

            self.state_change_history.append({
                'from': previous.value,
                'to': self.state.value
            })

            # Un ciclo se completa al volver al estado inicial
            if self.state == self.initial_state:
                self.total_cycles_completed += 1

            logger.debug("Semáforo: %s -> %s", previous.value, self.state.value)

    def get_state(self) -> LightState:
        """Retorna el estado actual del semáforo."""
        return self.state

    def can_vehicle_pass(self) -> bool:
        """Determina si un vehículo puede cruzar la línea de detención (solo en verde)."""
        return self.state == LightState.GREEN

    def get_cycle_length(self) -> int:
        """Retorna la duración total del ciclo completo."""
        return sum(self.durations.values())

    def get_time_until_green(self) -> float:
        """
        Calcula cuánto tiempo falta para el próximo verde.

        Returns:
            float: Segundos hasta el verde (0 si ya está en verde)
        """
        if self.state == LightState.GREEN:
            return 0.0

        time_to_green = self.durations[self.state] - self.timer
        state = NEXT_STATE[self.state]
        while state != LightState.GREEN:
            time_to_green += self.durations[state]
            state = NEXT_STATE[state]

        return float(time_to_green)

    def get_symbol(self) -> str:
        """Retorna el símbolo emoji del estado actual."""
        return VisualizationConfig.LIGHT_SYMBOLS.get(self.state.value, "?")

    def reset(self, state: Optional[LightState] = None):
        """
        Reinicia el semáforo al inicio del ciclo.

        Args:
            state: Estado al que reiniciar (por defecto, el inicial)
        """
        if state is not None:
            self.initial_state = state
        self.state = self.initial_state
        self.timer = 0
        self.total_cycles_completed = 0
        self.state_change_history.clear()

    def get_status_string(self) -> str:
        """
        Retorna una representación visual del estado actual.

        Returns:
            str: String con estado formateado
        """
        status = f"{self.get_symbol()} Estado: {self.state.value.upper()} | "
        status += f"Tiempo en estado: {self.timer}s / {self.durations[self.state]}s | "
        status += f"Ciclo: {self.total_cycles_completed}"
        return status

    def __str__(self) -> str:
        return f"TrafficLight({self.state.value})"

    def __repr__(self) -> str:
        return (f"TrafficLight(state={self.state.value}, "
                f"green={self.green_time}s, yellow={self.yellow_time}s, "
                f"red={self.red_time}s, timer={self.timer}s)")


if __name__ == "__main__":
    # Ejemplo de uso
    print("="*70)
    print("EJEMPLO: Semáforo de Carril")
    print("="*70)

    light = TrafficLight(initial_state=LightState.GREEN)
    print(f"\n{light!r}")
    print(f"Ciclo completo: {light.get_cycle_length()} segundos")

    for t in range(1, 25):
        light.update(1)
        print(f"T={t:3d}s: {light.get_status_string()}")
