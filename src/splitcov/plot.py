"""
draws the reduced coverage table as one panel per sample in a multi-page pdf
"""
from typing import Optional

import matplotlib

matplotlib.use('Agg')

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
from matplotlib.backends.backend_pdf import PdfPages  # noqa: E402

from .constants import CHART_TYPE, COLUMNS, DEFAULTS, FALLBACK_COLOR  # noqa: E402


def sample_colors(df: pd.DataFrame) -> dict:
    if COLUMNS.sample_color not in df:
        return {}
    colors = df[[COLUMNS.sample_name, COLUMNS.sample_color]].drop_duplicates(COLUMNS.sample_name)
    return {
        name: color
        for name, color in zip(colors[COLUMNS.sample_name], colors[COLUMNS.sample_color])
        if not pd.isnull(color)
    }


def draw_panel(ax, sample_df: pd.DataFrame, color: str, chart_type: str):
    x = sample_df[COLUMNS.x_values].to_numpy()
    y = sample_df[COLUMNS.coverage].to_numpy()
    if chart_type == CHART_TYPE.AREA:
        ax.fill_between(x, y, color=color, linewidth=0)
    else:
        ax.plot(x, y, color=color, linewidth=0.75)
    if len(x):
        ax.set_xlim(x.min(), max(x.max(), x.min() + 1))
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)


def draw_coverage_plot(
    df: pd.DataFrame,
    output: str,
    chart_type: str = DEFAULTS['chart_type'],
    free_y_scale: bool = DEFAULTS['free_y_scale'],
    panel_height: float = DEFAULTS['panel_height'],
    plot_width: float = DEFAULTS['plot_width'],
    samples_per_page: int = DEFAULTS['samples_per_page'],
    title: Optional[str] = None,
) -> int:
    """
    write the coverage of each sample as its own panel. Samples are drawn in the order they
    first appear in df

    Args:
        df: the reduced coverage table
        output: path to the pdf to write
        chart_type: one of CHART_TYPE
        free_y_scale: scale the y-axis of each panel independently
        panel_height: height (inches) of a single panel
        plot_width: width (inches) of the page
        samples_per_page: maximum number of panels on a page
        title: added to the top of every page

    Returns:
        the number of pages written
    """
    CHART_TYPE.enforce(chart_type)
    if samples_per_page < 1:
        raise ValueError('samples_per_page must be at least 1', samples_per_page)

    samples = list(pd.unique(df[COLUMNS.sample_name]))
    colors = sample_colors(df)
    ymax = df[COLUMNS.coverage].max() if len(df) else 1
    pages = 0

    with PdfPages(output) as pdf:
        for start in range(0, len(samples), samples_per_page):
            page_samples = samples[start : start + samples_per_page]
            fig, axes = plt.subplots(
                nrows=len(page_samples),
                ncols=1,
                figsize=(plot_width, panel_height * len(page_samples) + 0.75),
                squeeze=False,
            )
            for ax, sample_name in zip(axes[:, 0], page_samples):
                sample_df = df[df[COLUMNS.sample_name] == sample_name]
                draw_panel(ax, sample_df, colors.get(sample_name, FALLBACK_COLOR), chart_type)
                if not free_y_scale:
                    ax.set_ylim(0, ymax if ymax > 0 else 1)
                else:
                    ax.set_ylim(bottom=0)
                ax.set_ylabel(sample_name, rotation=0, ha='right', va='center')
            axes[-1, 0].set_xlabel('nucleotide position')
            if title:
                fig.suptitle(title)
            fig.tight_layout()
            pdf.savefig(fig)
            plt.close(fig)
            pages += 1
    return pages
