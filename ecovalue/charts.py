"""
Charts module: stacked bar charts for the aggregate tables.
"""

from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns

from . import config
from .aggregate import pivot_for_chart


def render_chart(table, x_field, y_field, fill_field, title, y_label, out_path=None):
    """
    Draw a stacked bar chart from a long aggregate table.

    Args:
        table: DataFrame with x_field, y_field and fill_field columns
        x_field: column on the x axis (one bar per value)
        y_field: column summed into bar height
        fill_field: column used for the stacked segments
        title: figure title
        y_label: y axis label
        out_path: optional PNG path (saved at config.FIGURE_DPI)

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=config.FIGURE_SIZE)
    if table.empty:
        ax.text(0.5, 0.5, "No records to display", ha='center', va='center', transform=ax.transAxes)
    else:
        wide = pivot_for_chart(table, x_field, y_field, fill_field)
        colors = sns.color_palette(config.PALETTE, n_colors=len(wide.columns))
        wide.plot(kind='bar', stacked=True, ax=ax, color=colors, edgecolor='black', linewidth=0.5)
        ax.legend(title=fill_field.replace('_', ' ').title(), bbox_to_anchor=(1.02, 1), loc='upper left')

    ax.set_xlabel(x_field.replace('_', ' ').title(), fontsize=11)
    ax.set_ylabel(y_label, fontsize=11)
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.tick_params(axis='x', labelrotation=30)
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()

    if out_path is not None:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=config.FIGURE_DPI, bbox_inches='tight')

    return fig
