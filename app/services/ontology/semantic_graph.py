"""Semantic fact graph for a single document.

Holds the subject-predicate-object triples describing one document. The
graph is owned by a request-scoped builder; triples are appended in order
and structurally identical triples are dropped (first write wins).
"""

from typing import Iterator, List, Optional, Set, Tuple

from app.models.ontology_models import DocumentType, InsuranceFields, TermType, Triple
from app.services.ontology.ontology import DEFAULT_ONTOLOGY, Ontology
from app.utils.logging import get_logger

LOGGER = get_logger(__name__)


class SemanticGraph:
    """Ordered collection of unique triples."""

    def __init__(self):
        self._triples: List[Triple] = []
        self._keys: Set[Tuple[str, str, str]] = set()

    def add(self, triple: Triple) -> bool:
        """Append a triple unless an identical one is already present.

        Args:
            triple: Triple to append

        Returns:
            True if the triple was appended, False if it was a duplicate
        """
        if triple.key in self._keys:
            return False
        self._keys.add(triple.key)
        self._triples.append(triple)
        return True

    def contains(self, triple: Triple) -> bool:
        """Return whether a triple with the same subject, predicate and object exists."""
        return triple.key in self._keys

    @property
    def triples(self) -> Tuple[Triple, ...]:
        """Read-only view of the triples in insertion order."""
        return tuple(self._triples)

    def __len__(self) -> int:
        return len(self._triples)

    def __iter__(self) -> Iterator[Triple]:
        return iter(tuple(self._triples))


class SemanticGraphBuilder:
    """Builds the fact graph of one document from pipeline outputs.

    A builder owns its graph, so one builder should be used per document.
    """

    def __init__(self, ontology: Ontology = DEFAULT_ONTOLOGY):
        self.ontology = ontology
        self.graph = SemanticGraph()

    def add_fact(
        self,
        subject: str,
        predicate: str,
        value: str,
        object_type: TermType = TermType.LITERAL,
    ) -> "SemanticGraphBuilder":
        """Append one fact, skipping it if the graph already has it."""
        triple = Triple(
            subject=subject,
            predicate=predicate,
            object=value,
            object_type=object_type,
        )
        if not self.graph.add(triple):
            LOGGER.debug(
                "Skipped duplicate triple",
                extra={"predicate": predicate, "object": value},
            )
        return self

    def build(
        self,
        subject: str,
        document_type: DocumentType,
        extracted_date: Optional[str],
        semantic_fields: InsuranceFields,
    ) -> SemanticGraph:
        """Assemble the document's facts.

        Args:
            subject: IRI of the document
            document_type: Classified document type
            extracted_date: Expiration date, if one was found
            semantic_fields: Insurance fields; absent ones are skipped

        Returns:
            SemanticGraph: The builder's graph with the new facts appended
        """
        self.add_fact(
            subject,
            self.ontology.property_iri("type"),
            self.ontology.iri_for(document_type),
            TermType.IRI,
        )

        if extracted_date:
            self.add_fact(
                subject,
                self.ontology.property_iri("expiration_date"),
                extracted_date,
            )

        for field_name, value in semantic_fields.present().items():
            self.add_fact(subject, self.ontology.property_iri(field_name), value)

        LOGGER.debug(
            f"Semantic graph holds {len(self.graph)} triples",
            extra={"subject": subject, "triple_count": len(self.graph)},
        )
        return self.graph
