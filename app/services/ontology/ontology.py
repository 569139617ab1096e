"""Read-only ontology table for insurance document verification.

The ontology bundles every piece of configuration the pipeline needs:
document-type IRIs, property IRIs, and the ordered pattern rules used for
classification, field extraction and confidence scoring. It is built once
and handed to each component; no component mutates it.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from app.models.ontology_models import DocumentType

SCHEMA_NS = "http://schema.org/"


@dataclass(frozen=True)
class ClassificationRule:
    """Maps a key-phrase pattern to a document type."""

    document_type: DocumentType
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class FieldRule:
    """Extracts one named field from the first capturing group of a pattern."""

    field_name: str
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class ConfidenceFactor:
    """A named group of patterns contributing ``weight * matched / total``."""

    name: str
    weight: float
    patterns: Tuple[re.Pattern[str], ...]


@dataclass(frozen=True)
class Ontology:
    """Immutable configuration shared by the ontology components.

    Attributes:
        document_types: Document type to IRI
        properties: Property name to predicate IRI
        classification_rules: Ordered classification rules, first match wins
        expiration_date_rules: Ordered date patterns, first match wins
        insurance_field_rules: Independent insurance field patterns
        base_confidence: Confidence before any factor is added
        date_present_weight: Contribution when an expiration date was found
        iso_date_bonus: Extra contribution when that date is ISO shaped
        iso_date_pattern: Shape of an ISO-like date
        confidence_factors: Pattern groups scored against the text
    """

    document_types: Mapping[DocumentType, str]
    properties: Mapping[str, str]
    classification_rules: Tuple[ClassificationRule, ...]
    expiration_date_rules: Tuple[re.Pattern[str], ...]
    insurance_field_rules: Tuple[FieldRule, ...]
    base_confidence: float
    date_present_weight: float
    iso_date_bonus: float
    iso_date_pattern: re.Pattern[str]
    confidence_factors: Tuple[ConfidenceFactor, ...]

    def iri_for(self, document_type: DocumentType) -> str:
        """Return the IRI of a document type."""
        return self.document_types[document_type]

    def property_iri(self, name: str) -> str:
        """Return the predicate IRI of a property."""
        return self.properties[name]


def _ci(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


DATE = r"(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})"


def build_default_ontology() -> Ontology:
    """Build the insurance document ontology.

    Returns:
        Ontology: Fully populated, read-only ontology
    """
    document_types = MappingProxyType({
        DocumentType.HEALTH_INSURANCE: SCHEMA_NS + "HealthInsuranceCard",
        DocumentType.LIFE_INSURANCE: SCHEMA_NS + "InsurancePolicy",
        DocumentType.CAR_INSURANCE: SCHEMA_NS + "AutoInsurancePolicy",
        DocumentType.PROPERTY_INSURANCE: SCHEMA_NS + "HomeInsurancePolicy",
        DocumentType.GENERAL_INSURANCE: SCHEMA_NS + "InsurancePolicy",
        DocumentType.GENERAL: SCHEMA_NS + "Document",
    })

    properties = MappingProxyType({
        "type": SCHEMA_NS + "type",
        "expiration_date": SCHEMA_NS + "expires",
        "policy_number": SCHEMA_NS + "policyNumber",
        "coverage_amount": SCHEMA_NS + "coverageAmount",
        "insurance_type": SCHEMA_NS + "insuranceType",
    })

    # Declaration order decides ties between co-occurring phrases
    classification_rules = (
        ClassificationRule(
            DocumentType.HEALTH_INSURANCE,
            _ci(r"health insurance|medical coverage|health plan"),
        ),
        ClassificationRule(
            DocumentType.LIFE_INSURANCE,
            _ci(r"life insurance|life coverage|death benefit"),
        ),
        ClassificationRule(
            DocumentType.CAR_INSURANCE,
            _ci(r"car insurance|auto insurance|vehicle coverage|motor insurance"),
        ),
        ClassificationRule(
            DocumentType.PROPERTY_INSURANCE,
            _ci(r"property insurance|home insurance|homeowner('s)? insurance"),
        ),
        ClassificationRule(
            DocumentType.GENERAL_INSURANCE,
            _ci(r"insurance policy|coverage|insurance certificate"),
        ),
    )

    expiration_date_rules = (
        # Label first: "Expires on 12/31/2025", "Valid until 1-1-26"
        _ci(r"(?:expir\w+|valid until|valid through).*?" + DATE),
        # Date first: "12/31/2025 (expiration)"
        _ci(DATE + r".*?(?:expiration|expiry)"),
        # Compact prefix: "Exp: 12/31/25", "Valid 01/01/2026"
        _ci(r"(?:exp|valid)(?:ires|iration)?:?\s*" + DATE),
    )

    insurance_field_rules = (
        FieldRule(
            "policy_number",
            _ci(r"policy\s*(?:number|#|no)[:.]?\s*([A-Z0-9-]+)"),
        ),
        FieldRule(
            "coverage_amount",
            _ci(r"(?:coverage|insured)\s*(?:amount|sum|value)[:.]?\s*[$€£]?\s*([\d,]+)"),
        ),
        FieldRule(
            "insurance_type",
            _ci(r"(?:type|class)\s*(?:of)?\s*(?:insurance|coverage)[:.]?\s*([A-Za-z\s]+)"),
        ),
    )

    confidence_factors = (
        ConfidenceFactor(
            "terminology_score",
            0.15,
            (
                _ci(r"policy\s*(?:number|#|no)"),
                _ci(r"coverage"),
                _ci(r"premium"),
                _ci(r"insur(?:ed|ance|er)"),
                _ci(r"beneficiary"),
            ),
        ),
        ConfidenceFactor(
            "policy_score",
            0.15,
            (
                re.compile(r"\$\s*[\d,]+"),
                re.compile(r"\d{5,}"),
                _ci(r"(valid|effective)\s*(from|until|through)"),
                _ci(r"terms?\s*(?:and|&)\s*conditions?"),
            ),
        ),
        ConfidenceFactor(
            "structure_score",
            0.20,
            (
                _ci(r"(?:page|section|part)\s*\d"),
                _ci(r"signature"),
                _ci(r"date[d:]|issued"),
                _ci(r"contact|phone|email"),
            ),
        ),
    )

    return Ontology(
        document_types=document_types,
        properties=properties,
        classification_rules=classification_rules,
        expiration_date_rules=expiration_date_rules,
        insurance_field_rules=insurance_field_rules,
        base_confidence=0.3,
        date_present_weight=0.2,
        iso_date_bonus=0.05,
        iso_date_pattern=re.compile(r"\d{4}[-/]\d{2}[-/]\d{2}"),
        confidence_factors=confidence_factors,
    )


# Shared read-only instance
DEFAULT_ONTOLOGY = build_default_ontology()
