"""Tabular loading and export for case pools and sampling outputs."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from case_sampling.model.cases import Case, FullCaseRecord, SampledCase
from case_sampling.scripts.irr import IRRResult
from case_sampling.scripts.parameter import (
    default_domain_keys,
    irr_csv_headers,
    sampled_cases_csv_headers,
)

logger = logging.getLogger("case_sampling.scripts.processing")

CASE_COLUMNS = ("assessment_id", "label", "overall_score")
FULL_CASE_COLUMNS = ("assessment_id", "country", "sector", "size")


def _require_columns(df: pd.DataFrame, required: Sequence[str]) -> None:
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise KeyError(
            f"Missing columns {missing}. Available columns: {list(df.columns)}"
        )


def _text(value) -> str:
    return "" if pd.isna(value) else str(value)


def resolve_domain_keys(
    df: pd.DataFrame, domain_keys: Optional[Sequence[str]] = None
) -> List[str]:
    """Domain columns to read from ``df``.

    Explicit keys must all be present; otherwise the default assessment
    domains found in ``df`` are used, in their default order.
    """
    if domain_keys is not None:
        _require_columns(df, domain_keys)
        return list(domain_keys)
    return [key for key in default_domain_keys if key in df.columns]


def cases_from_dataframe(
    df: pd.DataFrame, domain_keys: Optional[Sequence[str]] = None
) -> List[Case]:
    """Build a case pool from a table with one row per assessment.

    Args:
        df: DataFrame with assessment_id, label, overall_score, an optional
            context column and one column per domain
        domain_keys: Domain columns to read (defaults to the known domains
            present in ``df``)

    Returns:
        List of Case in row order. Empty (NaN) domain cells are left out of
        ``domain_scores`` and therefore count as 0.
    """
    _require_columns(df, CASE_COLUMNS)
    keys = resolve_domain_keys(df, domain_keys)

    cases = []
    for _, row in df.iterrows():
        scores: Dict[str, float] = {
            key: float(row[key]) for key in keys if not pd.isna(row[key])
        }
        cases.append(
            Case(
                assessment_id=str(row["assessment_id"]),
                label=_text(row["label"]),
                overall_score=float(row["overall_score"]),
                domain_scores=scores,
                context=_text(row["context"]) if "context" in df.columns else "",
            )
        )

    logger.debug(f"Loaded {len(cases)} cases over domains {keys}")
    return cases


def full_cases_from_dataframe(df: pd.DataFrame) -> Dict[str, FullCaseRecord]:
    """Organisation records keyed by assessment_id; later rows win on duplicates."""
    _require_columns(df, FULL_CASE_COLUMNS)
    return {
        str(row["assessment_id"]): FullCaseRecord(
            assessment_id=str(row["assessment_id"]),
            country=_text(row["country"]),
            sector=_text(row["sector"]),
            size=_text(row["size"]),
        )
        for _, row in df.iterrows()
    }


def read_cases_csv(
    file_path: Union[str, Path], domain_keys: Optional[Sequence[str]] = None
) -> List[Case]:
    """Read a case pool from a CSV file."""
    df = pd.read_csv(file_path, dtype={"assessment_id": str})
    return cases_from_dataframe(df, domain_keys)


def _write(csv: str, file_path: Optional[Union[str, Path]]) -> str:
    if file_path is not None:
        Path(file_path).write_text(csv, encoding="utf-8")
        logger.info(f"Exported CSV to {file_path}")
    return csv


def export_sampled_cases_to_csv(
    cases: Sequence[SampledCase], file_path: Optional[Union[str, Path]] = None
) -> str:
    """Export selected cases to CSV format.

    Args:
        cases: Sampled cases in selection order
        file_path: Optional path to also write the CSV to

    Returns:
        CSV string with columns Label, Overall Score, Context, Justification
    """
    df = pd.DataFrame(
        [
            [c.label, f"{c.overall_score:.2f}", c.context, c.justification]
            for c in cases
        ],
        columns=list(sampled_cases_csv_headers),
    )
    return _write(df.to_csv(index=False), file_path)


def export_irr_to_csv(
    result: IRRResult, file_path: Optional[Union[str, Path]] = None
) -> str:
    """Export per-tag inter-rater agreement to CSV format.

    Args:
        result: Output of calculate_irr
        file_path: Optional path to also write the CSV to

    Returns:
        CSV string, one row per tag
    """
    df = pd.DataFrame(
        [
            [
                t.tag_name,
                f"{t.kappa:.2f}",
                t.interpretation,
                f"{t.observed:.2f}",
                f"{t.expected:.2f}",
                t.rater1_count,
                t.rater2_count,
                t.both_count,
                t.total_responses,
            ]
            for t in result.per_tag
        ],
        columns=list(irr_csv_headers),
    )
    return _write(df.to_csv(index=False), file_path)
