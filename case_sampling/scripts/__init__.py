"""Case Sampling Scripts Package.

Contains selection, statistics and processing functions for case sampling.
"""

from .distance import (
    euclidean_distance,
    shuffle,
)
from .irr import (
    IRRResult,
    TagAgreement,
    calculate_irr,
    cohens_kappa,
    interpret_kappa,
)
from .methodology import generate_methodology_text
from .processing import (
    cases_from_dataframe,
    export_irr_to_csv,
    export_sampled_cases_to_csv,
    full_cases_from_dataframe,
    read_cases_csv,
)
from .selection import (
    extreme_deviant,
    maximum_variation,
    purposive_sampling,
    typical_cases,
)
from .statistics import (
    correlation_matrix,
    histogram,
    mean,
    median,
    pearson_correlation,
    standard_deviation,
)

__all__ = [
    # Selection
    "euclidean_distance",
    "shuffle",
    "maximum_variation",
    "extreme_deviant",
    "typical_cases",
    "purposive_sampling",
    "generate_methodology_text",
    # Statistics
    "mean",
    "median",
    "standard_deviation",
    "pearson_correlation",
    "correlation_matrix",
    "histogram",
    # Inter-rater reliability
    "cohens_kappa",
    "interpret_kappa",
    "calculate_irr",
    "IRRResult",
    "TagAgreement",
    # Processing
    "cases_from_dataframe",
    "full_cases_from_dataframe",
    "read_cases_csv",
    "export_sampled_cases_to_csv",
    "export_irr_to_csv",
]
