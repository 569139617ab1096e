"""Unit tests for SemanticGraph and SemanticGraphBuilder.

Tests ordered, deduplicated triple insertion and graph assembly from
pipeline outputs.
"""

import pytest

from app.models.ontology_models import DocumentType, InsuranceFields, TermType, Triple
from app.services.ontology.semantic_graph import SemanticGraph, SemanticGraphBuilder

SUBJECT = "http://example.org/doc/currentDocument"
SCHEMA = "http://schema.org/"


class TestSemanticGraph:
    """Test append-with-dedup semantics."""

    def test_add_returns_true_for_new_triple(self):
        """Test that a new triple is appended."""
        graph = SemanticGraph()

        assert graph.add(Triple(subject=SUBJECT, predicate=SCHEMA + "expires", object="1/1/30")) is True
        assert len(graph) == 1

    def test_duplicate_is_discarded_first_write_wins(self):
        """Test that an identical triple is dropped and order is kept."""
        graph = SemanticGraph()
        first = Triple(subject=SUBJECT, predicate=SCHEMA + "policyNumber", object="A-1")
        second = Triple(subject=SUBJECT, predicate=SCHEMA + "coverageAmount", object="10")

        graph.add(first)
        graph.add(second)
        added = graph.add(Triple(subject=SUBJECT, predicate=SCHEMA + "policyNumber", object="A-1"))

        assert added is False
        assert graph.triples == (first, second)

    def test_object_kind_is_not_part_of_identity(self):
        """Test that a literal repeating an IRI triple's text is discarded."""
        graph = SemanticGraph()
        first = Triple(
            subject=SUBJECT,
            predicate=SCHEMA + "type",
            object=SCHEMA + "Document",
            object_type=TermType.IRI,
        )
        graph.add(first)
        added = graph.add(Triple(subject=SUBJECT, predicate=SCHEMA + "type", object=SCHEMA + "Document"))

        assert added is False
        assert len(graph) == 1
        assert graph.triples[0].object_type == TermType.IRI

    def test_triples_view_is_read_only(self):
        """Test that the exposed view cannot alter the graph."""
        graph = SemanticGraph()
        graph.add(Triple(subject=SUBJECT, predicate=SCHEMA + "type", object="x"))

        assert isinstance(graph.triples, tuple)
        assert list(graph) == list(graph.triples)

    def test_contains(self):
        """Test membership checks by structure."""
        graph = SemanticGraph()
        graph.add(Triple(subject=SUBJECT, predicate=SCHEMA + "type", object="x"))

        assert graph.contains(Triple(subject=SUBJECT, predicate=SCHEMA + "type", object="x"))
        assert not graph.contains(Triple(subject=SUBJECT, predicate=SCHEMA + "type", object="y"))


class TestSemanticGraphBuilder:
    """Test graph assembly from classifier and extractor outputs."""

    @pytest.fixture
    def builder(self, ontology):
        """Create a fresh builder."""
        return SemanticGraphBuilder(ontology)

    def test_type_triple_only(self, builder):
        """Test that no date and no fields yield just the type triple."""
        graph = builder.build(SUBJECT, DocumentType.GENERAL, None, InsuranceFields())

        assert len(graph) == 1
        (triple,) = graph.triples
        assert triple.predicate == SCHEMA + "type"
        assert triple.object == SCHEMA + "Document"
        assert triple.object_type == TermType.IRI

    def test_full_graph_order(self, builder):
        """Test the type, expiry and field triples appear in order."""
        fields = InsuranceFields(policy_number="HI-4821", insurance_type="Dental")

        graph = builder.build(SUBJECT, DocumentType.HEALTH_INSURANCE, "12/31/2025", fields)

        assert [t.predicate for t in graph] == [
            SCHEMA + "type",
            SCHEMA + "expires",
            SCHEMA + "policyNumber",
            SCHEMA + "insuranceType",
        ]
        assert [t.object for t in graph][1:] == ["12/31/2025", "HI-4821", "Dental"]
        assert all(t.object_type == TermType.LITERAL for t in graph.triples[1:])

    def test_rebuild_does_not_duplicate(self, builder):
        """Test building the same facts twice leaves no duplicates."""
        fields = InsuranceFields(policy_number="P-1", coverage_amount="5,000")

        builder.build(SUBJECT, DocumentType.LIFE_INSURANCE, "1/2/2030", fields)
        graph = builder.build(SUBJECT, DocumentType.LIFE_INSURANCE, "1/2/2030", fields)

        assert len(graph) == 4
        assert len({t.key for t in graph}) == len(graph)

    def test_equal_field_values_use_distinct_predicates(self, builder):
        """Test that equal values under different fields are both kept."""
        fields = InsuranceFields(policy_number="12345", coverage_amount="12345")

        graph = builder.build(SUBJECT, DocumentType.GENERAL_INSURANCE, None, fields)

        assert len(graph) == 3

    def test_add_fact_is_chainable(self, builder):
        """Test add_fact returns the builder and skips duplicates."""
        builder.add_fact(SUBJECT, SCHEMA + "expires", "1/1/30").add_fact(
            SUBJECT, SCHEMA + "expires", "1/1/30"
        )

        assert len(builder.graph) == 1

    def test_add_fact_ignores_object_kind_for_duplicates(self, builder, ontology):
        """Test a literal fact matching the type triple's text is skipped."""
        builder.build(SUBJECT, DocumentType.GENERAL, None, InsuranceFields())

        builder.add_fact(SUBJECT, SCHEMA + "type", ontology.iri_for(DocumentType.GENERAL))

        assert len(builder.graph) == 1
        assert builder.graph.triples[0].object_type == TermType.IRI
