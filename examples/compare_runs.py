"""
Script de ejemplo: Comparación de corridas con distintas semillas.

Ejecuta varias simulaciones sin visualización, resume sus métricas en
una tabla y guarda un gráfico de ocupación de la última corrida.
"""

import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib
matplotlib.use("Agg")

from src.simulator import TrafficSimulator
from src.utils.config import RESULTS_DIR, ensure_directories, setup_logging
from src.utils.metrics import MetricsCalculator


def main():
    """Función principal del ejemplo."""
    setup_logging()
    ensure_directories()

    print("="*80)
    print("COMPARACIÓN DE CORRIDAS")
    print("="*80)

    results = {}
    simulator = None

    for seed in [1, 2, 3, 4, 5]:
        simulator = TrafficSimulator(seed=seed)
        results[f"seed={seed}"] = simulator.run(render=False, frame_delay=0)

    calc = MetricsCalculator()
    df = calc.create_summary_dataframe(results)
    print(df.to_string(index=False))

    fig = calc.plot_lane_occupancy(simulator.occupancy_history)
    output = RESULTS_DIR / "lane_occupancy.png"
    fig.savefig(output)
    print(f"\nGráfico guardado en: {output}")


if __name__ == "__main__":
    main()
