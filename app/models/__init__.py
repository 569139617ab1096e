"""Pydantic models for ontology-based document verification."""

from app.models.ontology_models import (
    ConfidenceScore,
    DocumentType,
    ExpirationStatus,
    ExtractedFields,
    InsuranceFields,
    OntologyValidation,
    TermType,
    Triple,
)

__all__ = [
    "ConfidenceScore",
    "DocumentType",
    "ExpirationStatus",
    "ExtractedFields",
    "InsuranceFields",
    "OntologyValidation",
    "TermType",
    "Triple",
]
