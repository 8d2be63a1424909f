"""
Sistema de métricas y análisis de resultados.

Este módulo proporciona funciones para calcular y analizar métricas
de una corrida de la simulación de carriles.
"""

from typing import List, Dict, Optional, Tuple
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from src.utils.config import VisualizationConfig


class MetricsCalculator:
    """
    Calculadora de métricas de evaluación para simulaciones de tráfico.

    Proporciona métodos estáticos para calcular diversas métricas
    de rendimiento del sistema.
    """

    @staticmethod
    def average_speed(vehicles: List) -> float:
        """
        Calcula la velocidad promedio de los vehículos.

        Args:
            vehicles: Lista de vehículos

        Returns:
            float: Velocidad promedio en km/h
        """
        if not vehicles:
            return 0.0

        speeds = [v.speed_kmh for v in vehicles]
        return float(np.mean(speeds))

    @staticmethod
    def average_travel_time(vehicles: List) -> float:
        """
        Calcula el tiempo promedio de recorrido del carril.

        Args:
            vehicles: Lista de vehículos que salieron

        Returns:
            float: Tiempo promedio en segundos
        """
        if not vehicles:
            return 0.0

        times = [v.exit_time - v.spawn_time for v in vehicles]
        return float(np.mean(times))

    @staticmethod
    def throughput(vehicles: List, simulation_time: float) -> float:
        """
        Calcula el throughput (vehículos que salieron por minuto).

        Args:
            vehicles: Lista de vehículos que salieron
            simulation_time: Tiempo total de simulación en segundos

        Returns:
            float: Vehículos por minuto
        """
        if simulation_time <= 0:
            return 0.0

        return (len(vehicles) / simulation_time) * 60

    @staticmethod
    def stalled_vehicles(vehicles: List) -> int:
        """Cuenta los vehículos detenidos definitivamente en la línea."""
        return sum(1 for v in vehicles if v.is_stalled())

    @staticmethod
    def average_occupancy(occupancy_history: List[Dict]) -> float:
        """
        Calcula la ocupación promedio por carril.

        Args:
            occupancy_history: Historial de ocupación por paso

        Returns:
            float: Vehículos promedio por carril
        """
        all_values = []
        for snapshot in occupancy_history:
            all_values.extend(snapshot['occupancy'].values())

        return float(np.mean(all_values)) if all_values else 0.0

    @staticmethod
    def max_occupancy(occupancy_history: List[Dict]) -> int:
        """
        Encuentra la ocupación máxima observada en un carril.

        Args:
            occupancy_history: Historial de ocupación por paso

        Returns:
            int: Máximo de vehículos en un carril
        """
        all_values = []
        for snapshot in occupancy_history:
            all_values.extend(snapshot['occupancy'].values())

        return max(all_values) if all_values else 0

    @staticmethod
    def occupancy_dataframe(occupancy_history: List[Dict]) -> pd.DataFrame:
        """
        Convierte el historial de ocupación en un DataFrame.

        Args:
            occupancy_history: Historial de ocupación por paso

        Returns:
            pd.DataFrame: Una fila por paso, una columna por carril
        """
        rows = []
        for snapshot in occupancy_history:
            row = {'time': snapshot['time']}
            for lane_id, count in snapshot['occupancy'].items():
                row[f"lane_{lane_id}"] = count
            rows.append(row)

        df = pd.DataFrame(rows)
        if not df.empty:
            df = df.set_index('time')
        return df

    @staticmethod
    def create_summary_dataframe(results: Dict[str, Dict]) -> pd.DataFrame:
        """
        Crea un DataFrame con resumen comparativo de corridas.

        Args:
            results: Dict {nombre_corrida: metrics_dict}

        Returns:
            pd.DataFrame: DataFrame con métricas comparadas
        """
        data = []

        for run_name, metrics in results.items():
            data.append({
                'Run': run_name,
                'Generated': metrics.get('vehicles_generated', 0),
                'Completed': metrics.get('vehicles_completed', 0),
                'Active': metrics.get('vehicles_active', 0),
                'Stalled': metrics.get('vehicles_stalled', 0),
                'Throughput (veh/min)': metrics.get('throughput_per_minute', 0),
                'Avg Travel Time (s)': metrics.get('avg_travel_time', 0),
                'Avg Occupancy': metrics.get('avg_occupancy', 0),
            })

        df = pd.DataFrame(data)

        # Ordenar por throughput (mayor es mejor)
        if not df.empty:
            df = df.sort_values('Throughput (veh/min)', ascending=False)

        return df

    @staticmethod
    def plot_lane_occupancy(occupancy_history: List[Dict],
                            figsize: Optional[Tuple[int, int]] = None) -> plt.Figure:
        """
        Grafica la ocupación de cada carril a lo largo del tiempo.

        Args:
            occupancy_history: Historial de ocupación por paso
            figsize: Tamaño de la figura

        Returns:
            plt.Figure: Figura de matplotlib
        """
        df = MetricsCalculator.occupancy_dataframe(occupancy_history)

        fig, ax = plt.subplots(figsize=figsize or VisualizationConfig.FIGURE_SIZE,
                               dpi=VisualizationConfig.DPI)
        for column in df.columns:
            ax.step(df.index, df[column], where='post', label=column)

        ax.set_title("Ocupación por carril", fontsize=12, fontweight='bold')
        ax.set_xlabel("Tiempo (s)")
        ax.set_ylabel("Vehículos")
        ax.grid(alpha=0.3)
        if len(df.columns) > 0:
            ax.legend()

        plt.tight_layout()
        return fig
