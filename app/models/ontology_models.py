"""Data models for ontology-based document verification.

This module defines the data structures produced by the ontology pipeline:
document types, extracted fields, confidence scores, and the semantic
triples that make up a document's fact graph.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class DocumentType(str, Enum):
    """Document types recognised by the classifier.

    Values are type names, not IRIs: several types share one IRI in the
    ontology table, so the IRI is looked up through the ontology.
    """

    HEALTH_INSURANCE = "HealthInsurance"
    LIFE_INSURANCE = "LifeInsurance"
    CAR_INSURANCE = "CarInsurance"
    PROPERTY_INSURANCE = "PropertyInsurance"
    GENERAL_INSURANCE = "GeneralInsurance"
    GENERAL = "General"


class TermType(str, Enum):
    """Kind of value in the object position of a triple."""

    IRI = "iri"
    LITERAL = "literal"


class ExpirationStatus(str, Enum):
    """Expiration state of a document relative to a reference date."""

    ACTIVE = "active"
    EXPIRED = "expired"
    UNKNOWN = "unknown"


class InsuranceFields(BaseModel):
    """Insurance-specific fields matched in document text.

    Every field is optional; partial results are normal.
    """

    policy_number: Optional[str] = Field(None, description="Policy number")
    coverage_amount: Optional[str] = Field(
        None, description="Raw coverage amount without currency symbol"
    )
    insurance_type: Optional[str] = Field(None, description="Type or class of insurance")

    def present(self) -> Dict[str, str]:
        """Return the fields that were matched, in declaration order."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if value is not None
        }


class ExtractedFields(InsuranceFields):
    """All fields extracted from a document, including the expiration date."""

    expiration_date: Optional[str] = Field(
        None, description="Expiration date exactly as it appears in the text"
    )

    @property
    def semantic_fields(self) -> InsuranceFields:
        """Insurance fields without the expiration date."""
        return InsuranceFields(
            policy_number=self.policy_number,
            coverage_amount=self.coverage_amount,
            insurance_type=self.insurance_type,
        )


class ConfidenceScore(BaseModel):
    """Confidence score with its per-factor breakdown.

    ``score`` is always ``min(1.0, base + sum(factors.values()))``.
    """

    score: float = Field(..., ge=0.0, le=1.0, description="Overall confidence")
    factors: Dict[str, float] = Field(
        default_factory=dict,
        description="Contribution of each factor to the score",
    )


class Triple(BaseModel):
    """A subject-predicate-object fact in the semantic graph."""

    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., description="Subject IRI")
    predicate: str = Field(..., description="Predicate IRI")
    object: str = Field(..., description="Object IRI or literal value")
    object_type: TermType = Field(default=TermType.LITERAL, description="Kind of object")

    @property
    def key(self) -> Tuple[str, str, str]:
        """Structural identity of the triple; the object kind is not part of it."""
        return (self.subject, self.predicate, self.object)


class OntologyValidation(BaseModel):
    """Result of running the ontology pipeline over one document."""

    document_class: str = Field(..., description="IRI of the document type")
    document_type: DocumentType = Field(..., description="Document type name")
    subject: str = Field(..., description="IRI of the document in the graph")
    extracted_fields: ExtractedFields = Field(default_factory=ExtractedFields)
    initial_confidence: ConfidenceScore
    semantic_matches: Dict[str, str] = Field(
        default_factory=dict,
        description="Insurance fields that matched, keyed by field name",
    )
    rdf_triples: int = Field(..., ge=1, description="Number of triples in the graph")
    triples: List[Triple] = Field(default_factory=list)
    expiration_status: ExpirationStatus = ExpirationStatus.UNKNOWN

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "document_class": "http://schema.org/HealthInsuranceCard",
                    "document_type": "HealthInsurance",
                    "subject": "http://example.org/doc/currentDocument",
                    "extracted_fields": {
                        "policy_number": "HI-4821",
                        "coverage_amount": "50,000",
                        "insurance_type": None,
                        "expiration_date": "12/31/2025",
                    },
                    "initial_confidence": {
                        "score": 0.665,
                        "factors": {
                            "date_validation": 0.2,
                            "terminology_score": 0.09,
                            "policy_score": 0.075,
                            "structure_score": 0.0,
                        },
                    },
                    "semantic_matches": {
                        "policy_number": "HI-4821",
                        "coverage_amount": "50,000",
                    },
                    "rdf_triples": 4,
                    "triples": [],
                    "expiration_status": "expired",
                }
            ]
        }
    }
