"""Case data model.

Immutable value objects shared by the selection functions and the
sampling strategies. Selection never mutates a :class:`Case`; selected
cases are copied into :class:`SampledCase` with a justification added.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Protocol, Tuple, Union


class SamplingMethod(Enum):
    """Available case sampling methods."""

    MAXIMUM_VARIATION = "maximum_variation"
    EXTREME_DEVIANT = "extreme_deviant"
    TYPICAL = "typical"
    PURPOSIVE = "purposive"

    @classmethod
    def from_string(cls, value: str) -> "SamplingMethod":
        """Convert string to SamplingMethod enum."""
        for method in cls:
            if method.value == value.lower():
                return method
        raise ValueError(f"Unknown sampling method: {value}")


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1).

    ``random.Random`` and ``numpy.random.Generator`` both qualify.
    """

    def random(self) -> float: ...


@dataclass(frozen=True)
class Case:
    """One assessed organisation with its score profile.

    ``domain_scores`` is copied into a read-only mapping and left out of the
    hash, so cases can be used in sets and as dict keys.
    """

    assessment_id: str
    label: str
    overall_score: float
    domain_scores: Mapping[str, float] = field(hash=False)
    context: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "domain_scores", MappingProxyType(dict(self.domain_scores))
        )

    def score(self, domain_key: str) -> float:
        """Domain score, 0 when the domain was not scored."""
        return float(self.domain_scores.get(domain_key, 0.0))


@dataclass(frozen=True)
class SampledCase(Case):
    """A selected case annotated with the reason it was selected."""

    justification: str = ""

    @classmethod
    def from_case(cls, case: Case, justification: str) -> "SampledCase":
        values = {f.name: getattr(case, f.name) for f in fields(Case)}
        return cls(justification=justification, **values)


@dataclass(frozen=True)
class FullCaseRecord:
    """Organisation attributes used to filter purposive samples."""

    assessment_id: str
    country: str = ""
    sector: str = ""
    size: str = ""


@dataclass
class PurposiveCriteria:
    """Targeted sub-population; empty fields do not constrain the frame."""

    country: Optional[str] = None
    sector: Optional[str] = None
    size: Optional[str] = None

    def active(self) -> List[Tuple[str, str]]:
        """Supplied criteria as (field, value) pairs in country, sector, size order."""
        return [
            (name, value)
            for name, value in (
                ("country", self.country),
                ("sector", self.sector),
                ("size", self.size),
            )
            if value
        ]

    def matches(self, record: FullCaseRecord) -> bool:
        return all(getattr(record, name) == value for name, value in self.active())

    def describe(self) -> str:
        return ", ".join(f"{name}={value}" for name, value in self.active())

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PurposiveCriteria":
        data = data or {}
        return cls(
            country=data.get("country") or None,
            sector=data.get("sector") or None,
            size=data.get("size") or None,
        )


FullCases = Union[Mapping[str, FullCaseRecord], Iterable[FullCaseRecord]]
