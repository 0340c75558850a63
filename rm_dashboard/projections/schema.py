# rm_dashboard/projections/schema.py
"""Column and phase constants for retirement projection output.

All modules that build or consume projection tables should import from here.
"""
from enum import Enum


class Phase(Enum):
    """Lifecycle phase of a projected year."""

    ACCUMULATION = "accumulation"
    DEPLETION = "depletion"


# Projection table columns
AGE = "age"
CORPUS = "corpus"
PHASE = "phase"
FORMATTED_CORPUS = "formatted_corpus"

PROJECTION_COLUMNS = [AGE, CORPUS, PHASE, FORMATTED_CORPUS]

# Summary keys
SUMMARY_START_CORPUS = "start_corpus"
SUMMARY_RETIREMENT_CORPUS = "retirement_corpus"
SUMMARY_PEAK_CORPUS = "peak_corpus"
SUMMARY_PEAK_AGE = "peak_age"
SUMMARY_EXHAUSTION_AGE = "exhaustion_age"
SUMMARY_LASTS_TO_HORIZON = "lasts_to_horizon"
SUMMARY_YEARS_PROJECTED = "years_projected"

# Fixed horizon of the depletion phase
DEFAULT_HORIZON_AGE = 85

EXHAUSTED_LABEL = "₹0Cr"
