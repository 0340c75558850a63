# rm_dashboard/projections/reporting.py
"""
Reporting for retirement projections: summary metrics, CSV/YAML export and a
static chart of the accumulation and depletion phases.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd
import yaml

# To prevent GUI errors on headless servers, and for consistency:
import matplotlib
matplotlib.use('Agg')  # Use a non-interactive backend
import matplotlib.pyplot as plt
import matplotlib.ticker as mtick

from rm_dashboard.utils.formatting import format_crore
from . import schema
from .calculator import RetirementProjection

logger = logging.getLogger(__name__)

ACCUMULATION_COLOR = "#10b981"
DEPLETION_COLOR = "#f59e0b"
RETIREMENT_LINE_COLOR = "#ef4444"


def summarize_projection(projection: RetirementProjection) -> Dict[str, Any]:
    """
    Headline numbers for a projection.

    Returns:
        Dict keyed by the ``SUMMARY_*`` constants in :mod:`.schema`. Corpus
        values are ``None`` for an empty projection.
    """
    if not projection.points:
        logger.warning("Projection is empty. Returning empty summary.")
        return {
            schema.SUMMARY_START_CORPUS: None,
            schema.SUMMARY_RETIREMENT_CORPUS: None,
            schema.SUMMARY_PEAK_CORPUS: None,
            schema.SUMMARY_PEAK_AGE: None,
            schema.SUMMARY_EXHAUSTION_AGE: None,
            schema.SUMMARY_LASTS_TO_HORIZON: False,
            schema.SUMMARY_YEARS_PROJECTED: 0,
        }

    ages = np.array([p.age for p in projection.points])
    corpus = np.array([p.corpus for p in projection.points])
    retirement_point = projection.retirement_point
    exhaustion_age = projection.exhaustion_age

    return {
        schema.SUMMARY_START_CORPUS: int(corpus[0]),
        schema.SUMMARY_RETIREMENT_CORPUS: retirement_point.corpus if retirement_point else None,
        schema.SUMMARY_PEAK_CORPUS: projection.peak_corpus,
        schema.SUMMARY_PEAK_AGE: int(ages[np.argmax(corpus)]),
        schema.SUMMARY_EXHAUSTION_AGE: exhaustion_age,
        schema.SUMMARY_LASTS_TO_HORIZON: exhaustion_age is None and int(ages[-1]) >= projection.horizon_age,
        schema.SUMMARY_YEARS_PROJECTED: len(projection),
    }


def save_projection_results(
    projection: RetirementProjection,
    output_dir: Path,
    scenario_name: str = "retirement_projection",
) -> Dict[str, Path]:
    """
    Write the projection table (CSV) and its summary (YAML) to ``output_dir``.

    Returns:
        Mapping of artefact kind ("table", "summary") to the written path.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    table_path = output_dir / f"{scenario_name}.csv"
    summary_path = output_dir / f"{scenario_name}_summary.yaml"

    df: pd.DataFrame = projection.to_frame()
    df.to_csv(table_path, index=False)
    logger.info(f"Saved projection table ({len(df)} rows) to {table_path}")

    with open(summary_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(summarize_projection(projection), f, sort_keys=False, allow_unicode=True)
    logger.info(f"Saved projection summary to {summary_path}")

    return {"table": table_path, "summary": summary_path}


def plot_retirement_projection(
    projection: RetirementProjection,
    output_path: Path,
    title: Optional[str] = None,
) -> Optional[Path]:
    """
    Save an area chart of the projection: accumulation in green, depletion in
    amber, dashed red line at the retirement age.

    Plotting problems are logged and swallowed; the return value is ``None``
    when nothing was written.
    """
    if not projection.points:
        logger.warning("Projection is empty. Skipping plotting.")
        return None

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    accumulation, depletion = projection.chart_series()

    try:
        fig, ax = plt.subplots(figsize=(10, 6))

        for series, color, label in (
            (accumulation, ACCUMULATION_COLOR, "Accumulation Phase"),
            (depletion, DEPLETION_COLOR, "Retirement Phase"),
        ):
            if not series:
                continue
            ages = [p.age for p in series]
            values = [p.corpus for p in series]
            ax.plot(ages, values, color=color, linewidth=2, label=label)
            ax.fill_between(ages, values, color=color, alpha=0.15)

        ax.axvline(projection.retirement_age, color=RETIREMENT_LINE_COLOR, linestyle="--", label="Retirement")
        ax.set_xlabel("Age")
        ax.set_ylabel("Corpus")
        ax.yaxis.set_major_formatter(mtick.FuncFormatter(lambda value, _pos: format_crore(value)))
        ax.grid(True, linestyle="--", color="#e2e8f0")
        ax.legend()
        ax.set_title(title or "Retirement Corpus Projection")

        fig.tight_layout()
        fig.savefig(output_path)
        plt.close(fig)  # Close the figure to free memory
        logger.info(f"Saved projection plot to {output_path}")
        return output_path

    except Exception as e:
        logger.error(f"Error during plotting: {e}", exc_info=True)
        plt.close("all")
        return None
