"""Unit tests for DocumentClassifier.

Tests first-match-wins classification of document text into insurance
document types.
"""

import pytest

from app.models.ontology_models import DocumentType
from app.services.ontology.classifier import DocumentClassifier


class TestDocumentClassifierCategories:
    """Test each category rule on its own."""

    @pytest.fixture
    def classifier(self, ontology):
        """Create classifier bound to the default ontology."""
        return DocumentClassifier(ontology)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Your Health Insurance card", DocumentType.HEALTH_INSURANCE),
            ("Summary of medical coverage", DocumentType.HEALTH_INSURANCE),
            ("Group HEALTH PLAN enrollment", DocumentType.HEALTH_INSURANCE),
            ("Term life insurance certificate", DocumentType.LIFE_INSURANCE),
            ("The death benefit is payable to", DocumentType.LIFE_INSURANCE),
            ("Car insurance renewal notice", DocumentType.CAR_INSURANCE),
            ("Vehicle coverage declarations", DocumentType.CAR_INSURANCE),
            ("Motor insurance schedule", DocumentType.CAR_INSURANCE),
            ("Homeowner's insurance policy", DocumentType.PROPERTY_INSURANCE),
            ("Homeowner insurance binder", DocumentType.PROPERTY_INSURANCE),
            ("Property insurance for warehouse", DocumentType.PROPERTY_INSURANCE),
            ("This insurance certificate confirms", DocumentType.GENERAL_INSURANCE),
            ("Coverage begins at noon", DocumentType.GENERAL_INSURANCE),
        ],
    )
    def test_classify_category_phrases(self, classifier, text, expected):
        """Test that each key phrase maps to its category, case-insensitively."""
        assert classifier.classify(text) == expected

    def test_classify_no_match_is_general(self, classifier):
        """Test that text without key phrases is classified as General."""
        assert classifier.classify("Quarterly sales report for the board") == DocumentType.GENERAL

    def test_classify_empty_text_is_general(self, classifier):
        """Test that empty text is classified as General."""
        assert classifier.classify("") == DocumentType.GENERAL

    def test_classify_iri(self, classifier, ontology):
        """Test that the IRI form uses the ontology table."""
        assert classifier.classify_iri("car insurance") == "http://schema.org/AutoInsurancePolicy"
        assert classifier.classify_iri("") == ontology.iri_for(DocumentType.GENERAL)


class TestDocumentClassifierPriority:
    """Test declaration-order tie-breaking between co-occurring phrases."""

    @pytest.fixture
    def classifier(self):
        """Create classifier with the default ontology."""
        return DocumentClassifier()

    def test_first_declared_rule_wins_over_text_position(self, classifier):
        """Test that health beats life even when life is mentioned first."""
        text = "This life insurance rider supplements your health insurance."

        assert classifier.classify(text) == DocumentType.HEALTH_INSURANCE

    def test_first_declared_rule_wins_over_frequency(self, classifier):
        """Test that a single car phrase beats repeated property phrases."""
        text = (
            "Property insurance. Property insurance schedule. "
            "Property insurance endorsements. Car insurance addendum."
        )

        assert classifier.classify(text) == DocumentType.CAR_INSURANCE

    def test_specific_category_beats_general_coverage(self, classifier):
        """Test that rule 1 wins over rule 5 when both match."""
        text = "Coverage summary: medical coverage for dependants"

        assert classifier.classify(text) == DocumentType.HEALTH_INSURANCE

    def test_classification_is_deterministic(self, classifier, health_policy_text):
        """Test repeated calls give the same answer."""
        results = {classifier.classify(health_policy_text) for _ in range(5)}

        assert results == {DocumentType.HEALTH_INSURANCE}

    def test_result_is_always_a_known_type(self, classifier):
        """Test that every input yields exactly one known type."""
        samples = ["", "   ", "coverage", "random words", "LIFE COVERAGE", "\n\n"]

        for text in samples:
            assert classifier.classify(text) in set(DocumentType)
