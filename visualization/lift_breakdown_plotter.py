# visualization/lift_breakdown_plotter.py
"""
Lift Breakdown Visualization Module
"""

import matplotlib.pyplot as plt
from pathlib import Path
from datetime import datetime

from calculators.lift_coefficient import LiftCoefficientModel
from common.terminal_formatting import saved


def plot_lift_breakdown(results, title_prefix: str, output_dir: Path = None):
    """
    Plot total lift, CL* and each correction term against time.

    Parameters:
    -----------
    results : TimeHistoryResults
        Output of TimeHistoryCalculator with a lift model in the schedule
    title_prefix : str
        Prefix for the figure title and file name
    output_dir : Path, optional
        If given, the figure is saved there as a timestamped PNG

    Returns:
    --------
    matplotlib.figure.Figure
    """
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    frame = results.frame
    t = frame['time']

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(11, 8), sharex=True)

    ax1.plot(t, frame['c_lift'], lw=1.5, label=r'$C_L$')
    if 'cl_star' in frame.columns:
        ax1.plot(t, frame['cl_star'], '--', lw=1.2, label=r'$C_L^*$')
    ax1.set_ylabel(r'$C_L$ [-]')
    ax1.set_title(f'{title_prefix} – Lift Coefficient')
    ax1.grid(True, alpha=0.3)
    ax1.legend()

    for term in LiftCoefficientModel.TERMS[1:]:
        col = f'lift.{term}'
        if col in frame.columns:
            ax2.plot(t, frame[col], lw=1.2, label=term.replace('_', ' '))
    ax2.set_xlabel('Time [s]')
    ax2.set_ylabel(r'$\Delta C_L$ [-]')
    ax2.set_title(f'{title_prefix} – Lift Corrections')
    ax2.grid(True, alpha=0.3)
    ax2.legend(fontsize=8)

    fig.tight_layout()
    if output_dir:
        out = Path(output_dir) / f'{title_prefix}_lift_breakdown_{ts}.png'
        fig.savefig(out, bbox_inches='tight', dpi=150)
        print(f'  {saved(str(out))}')
    return fig
