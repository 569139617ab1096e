"""Rule-based document type classifier.

Classifies free-form document text into one insurance document type by
testing the ontology's key-phrase rules in declaration order.
"""

from app.models.ontology_models import DocumentType
from app.services.ontology.ontology import DEFAULT_ONTOLOGY, Ontology
from app.utils.logging import get_logger

LOGGER = get_logger(__name__)


class DocumentClassifier:
    """Classifies documents using ordered, first-match-wins phrase rules.

    When phrases of several categories appear in the same document, the
    earliest declared rule wins regardless of where or how often each phrase
    occurs. Text matching no rule is classified as ``DocumentType.GENERAL``.
    """

    def __init__(self, ontology: Ontology = DEFAULT_ONTOLOGY):
        self.ontology = ontology

    def classify(self, text: str) -> DocumentType:
        """Classify document text.

        Args:
            text: Plain document text

        Returns:
            DocumentType: Type of the first matching rule, or GENERAL
        """
        for rule in self.ontology.classification_rules:
            if rule.pattern.search(text):
                LOGGER.debug(
                    f"Classified document as {rule.document_type.value}",
                    extra={"document_type": rule.document_type.value},
                )
                return rule.document_type

        return DocumentType.GENERAL

    def classify_iri(self, text: str) -> str:
        """Classify document text and return the type's IRI."""
        return self.ontology.iri_for(self.classify(text))
