"""Explainable confidence scoring for ontology extraction results.

The score starts from the ontology's base confidence and adds independent,
non-negative factor contributions:

- date_validation: an expiration date was found (bonus when ISO shaped)
- terminology_score: insurance vocabulary present in the text
- policy_score: policy-structure elements (amounts, long numbers, validity)
- structure_score: document-structure markers (pages, signature, contact)

Each contribution is returned next to the score so callers can see why a
score was produced.
"""

from typing import Dict, Optional

from app.models.ontology_models import ConfidenceScore
from app.services.ontology.ontology import DEFAULT_ONTOLOGY, ConfidenceFactor, Ontology
from app.utils.logging import get_logger

LOGGER = get_logger(__name__)


class ConfidenceScorer:
    """Computes a 0-1 confidence score with a per-factor breakdown."""

    def __init__(self, ontology: Ontology = DEFAULT_ONTOLOGY):
        self.ontology = ontology

    def score(self, text: str, extracted_date: Optional[str]) -> ConfidenceScore:
        """Score how confidently the text was understood.

        Args:
            text: Plain document text
            extracted_date: Expiration date found in the text, if any

        Returns:
            ConfidenceScore: Score clamped to 1.0 and the factors it sums
        """
        factors: Dict[str, float] = {
            "date_validation": self._date_contribution(extracted_date),
        }
        for factor in self.ontology.confidence_factors:
            factors[factor.name] = self._pattern_contribution(factor, text)

        score = min(1.0, self.ontology.base_confidence + sum(factors.values()))

        LOGGER.debug(
            f"Confidence score {score:.3f}",
            extra={"score": score, "factors": factors},
        )
        return ConfidenceScore(score=score, factors=factors)

    def _date_contribution(self, extracted_date: Optional[str]) -> float:
        # ISO bonus only applies on top of a present date
        if not extracted_date:
            return 0.0
        contribution = self.ontology.date_present_weight
        if self.ontology.iso_date_pattern.search(extracted_date):
            contribution += self.ontology.iso_date_bonus
        return contribution

    @staticmethod
    def _pattern_contribution(factor: ConfidenceFactor, text: str) -> float:
        matched = sum(1 for pattern in factor.patterns if pattern.search(text))
        return (matched / len(factor.patterns)) * factor.weight
