"""Ontology-based document verification - classify, extract, score, and graph."""

from .analyzer import DocumentAnalyzer
from .classifier import DocumentClassifier
from .confidence_scorer import ConfidenceScorer
from .field_extractor import FieldExtractor
from .ontology import DEFAULT_ONTOLOGY, Ontology, build_default_ontology
from .semantic_graph import SemanticGraph, SemanticGraphBuilder
from .validity import expiration_status, parse_document_date

__all__ = [
    "DocumentAnalyzer",
    "DocumentClassifier",
    "ConfidenceScorer",
    "FieldExtractor",
    "DEFAULT_ONTOLOGY",
    "Ontology",
    "build_default_ontology",
    "SemanticGraph",
    "SemanticGraphBuilder",
    "expiration_status",
    "parse_document_date",
]
