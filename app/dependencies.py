"""Centralized dependency injection for FastAPI application.

This module provides factory functions for the services used by the API
routes, so tests can swap them through ``app.dependency_overrides``.
"""

from datetime import date

from app.config import settings
from app.services.ontology import DEFAULT_ONTOLOGY, DocumentAnalyzer


def get_document_analyzer() -> DocumentAnalyzer:
    """Get document analyzer instance.

    Returns:
        DocumentAnalyzer: Analyzer bound to the default ontology and the
        configured document namespace
    """
    return DocumentAnalyzer(
        ontology=DEFAULT_ONTOLOGY,
        document_namespace=settings.document_namespace,
        default_document_id=settings.default_document_id,
    )


def get_reference_date() -> date:
    """Get the date expiration status is evaluated against.

    Returns:
        date: Today's date
    """
    return date.today()
