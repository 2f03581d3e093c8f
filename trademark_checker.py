#!/usr/bin/env python3
"""
Trademark Risk Checker
======================
Classifies a candidate name against a table of well-known marks.

Containment of a mark is high risk and ends the scan. A name whose
similarity to a mark exceeds the medium threshold is medium risk; the scan
continues, so a later containment match still escalates to high.

This is an advisory heuristic, not a registry search.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional

from similarity_checker import clean_name, normalized_similarity
from settings import require_setting

SAFE_ADVICE = "This name appears to be safe to use."
UNCHECKED_ADVICE = ("Unable to check trademark compatibility. "
                    "Please consult a legal professional.")


class RiskLevel(str, Enum):
    """Trademark conflict likelihood"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class TrademarkResult:
    """Result of a trademark risk assessment"""
    name: str
    risk_level: RiskLevel = RiskLevel.LOW
    similar_marks: List[str] = field(default_factory=list)
    advice: str = SAFE_ADVICE

    @property
    def is_registered(self) -> bool:
        return self.risk_level == RiskLevel.HIGH

    def to_dict(self) -> dict:
        data = asdict(self)
        data['risk_level'] = self.risk_level.value
        data['is_registered'] = self.is_registered
        return data

    @classmethod
    def unchecked(cls, name: str) -> "TrademarkResult":
        """Fallback used when the assessment itself failed."""
        return cls(name=name, advice=UNCHECKED_ADVICE)


def _load_known_marks() -> Dict[str, str]:
    marks = require_setting("trademark.known_marks")
    return {str(mark).lower(): str(industry) for mark, industry in marks.items()}


class TrademarkChecker:
    """
    Assesses trademark risk for candidate names.

    Usage:
        checker = TrademarkChecker()
        result = checker.assess("MyAppleStore")
        print(result.risk_level, result.similar_marks)
    """

    def __init__(self, known_marks: Optional[Dict[str, str]] = None,
                 medium_threshold: Optional[float] = None):
        """
        Args:
            known_marks: Ordered mapping of mark -> industry label.
                         Defaults to trademark.known_marks in app.yaml.
            medium_threshold: Similarity above which a mark is a
                              medium-risk match.
        """
        if known_marks is None:
            known_marks = _load_known_marks()
        self.known_marks = {m.lower(): ind for m, ind in known_marks.items()}

        if medium_threshold is None:
            medium_threshold = require_setting("trademark.medium_threshold")
        self.medium_threshold = float(medium_threshold)

    def assess(self, name: str) -> TrademarkResult:
        """Assess a single name. Pure function of the name."""
        cleaned = clean_name(name)
        result = TrademarkResult(name=name)

        for mark, industry in self.known_marks.items():
            if mark in cleaned:
                result.risk_level = RiskLevel.HIGH
                result.similar_marks.append(mark)
                result.advice = (f'This name contains "{mark}" which is a registered '
                                 f'trademark in the {industry} industry.')
                break

            if normalized_similarity(cleaned, mark) > self.medium_threshold:
                result.risk_level = RiskLevel.MEDIUM
                result.similar_marks.append(mark)
                result.advice = (f'This name is similar to existing trademark "{mark}". '
                                 f'Consider modifications.')

        return result

    async def check(self, name: str) -> TrademarkResult:
        """Awaitable form of assess() for the concurrent pipeline."""
        return self.assess(name)

    def assess_batch(self, names: List[str]) -> Dict[str, TrademarkResult]:
        """Assess multiple names."""
        return {name: self.assess(name) for name in names}


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Assess trademark risk')
    parser.add_argument('names', nargs='+', help='Names to assess')
    args = parser.parse_args()

    checker = TrademarkChecker()
    for name in args.names:
        result = checker.assess(name)
        marks = ', '.join(result.similar_marks) or '-'
        print(f"{name}: {result.risk_level.value.upper()} [{marks}]")
        print(f"  {result.advice}")
