"""Ontology pipeline over one document's text.

Runs classification, field extraction, confidence scoring and graph
assembly in that order and packages the outputs as an OntologyValidation.
The pipeline performs no I/O and accepts any string, including an empty one.
"""

from datetime import date
from typing import Optional

from app.models.ontology_models import ExpirationStatus, OntologyValidation
from app.services.ontology.classifier import DocumentClassifier
from app.services.ontology.confidence_scorer import ConfidenceScorer
from app.services.ontology.field_extractor import FieldExtractor
from app.services.ontology.ontology import DEFAULT_ONTOLOGY, Ontology
from app.services.ontology.semantic_graph import SemanticGraphBuilder
from app.services.ontology.validity import expiration_status
from app.utils.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_DOCUMENT_NAMESPACE = "http://example.org/doc/"
DEFAULT_DOCUMENT_ID = "currentDocument"


class DocumentAnalyzer:
    """Classifier -> extractor -> scorer -> graph builder.

    The analyzer holds only read-only collaborators, so one instance can
    serve any number of documents.

    Attributes:
        ontology: Ontology shared by every stage
        document_namespace: IRI prefix for document subjects
        default_document_id: Local name used when no document id is given
    """

    def __init__(
        self,
        ontology: Ontology = DEFAULT_ONTOLOGY,
        document_namespace: str = DEFAULT_DOCUMENT_NAMESPACE,
        default_document_id: str = DEFAULT_DOCUMENT_ID,
    ):
        self.ontology = ontology
        self.document_namespace = document_namespace
        self.default_document_id = default_document_id
        self.classifier = DocumentClassifier(ontology)
        self.extractor = FieldExtractor(ontology)
        self.scorer = ConfidenceScorer(ontology)

    def subject_for(self, document_id: Optional[str] = None) -> str:
        """Build the subject IRI of a document."""
        return self.document_namespace + (document_id or self.default_document_id)

    def analyze(
        self,
        text: str,
        document_id: Optional[str] = None,
        as_of: Optional[date] = None,
    ) -> OntologyValidation:
        """Analyze one document.

        Args:
            text: Plain document text
            document_id: Optional local name for the document subject
            as_of: Reference date for the expiration status; without it the
                status is UNKNOWN

        Returns:
            OntologyValidation: Classification, fields, confidence and graph
        """
        subject = self.subject_for(document_id)

        document_type = self.classifier.classify(text)
        fields = self.extractor.extract(text)
        confidence = self.scorer.score(text, fields.expiration_date)

        # Fresh builder per document
        graph = SemanticGraphBuilder(self.ontology).build(
            subject,
            document_type,
            fields.expiration_date,
            fields.semantic_fields,
        )

        status = ExpirationStatus.UNKNOWN
        if as_of is not None:
            status = expiration_status(fields.expiration_date, as_of)

        LOGGER.debug(
            "Ontology analysis completed",
            extra={
                "subject": subject,
                "document_type": document_type.value,
                "confidence": confidence.score,
                "triple_count": len(graph),
            },
        )

        return OntologyValidation(
            document_class=self.ontology.iri_for(document_type),
            document_type=document_type,
            subject=subject,
            extracted_fields=fields,
            initial_confidence=confidence,
            semantic_matches=fields.semantic_fields.present(),
            rdf_triples=len(graph),
            triples=list(graph),
            expiration_status=status,
        )
