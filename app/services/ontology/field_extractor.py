"""Pattern-based field extraction for insurance documents.

Pulls the expiration date and the insurance-specific fields (policy number,
coverage amount, insurance type) out of plain text. Extraction never fails:
a field that cannot be matched is simply left as None.
"""

from typing import Dict, Optional

from app.models.ontology_models import ExtractedFields, InsuranceFields
from app.services.ontology.ontology import DEFAULT_ONTOLOGY, Ontology
from app.utils.logging import get_logger

LOGGER = get_logger(__name__)


class FieldExtractor:
    """Extracts expiration dates and insurance fields with ontology patterns.

    Attributes:
        ontology: Read-only ontology providing the extraction rules
    """

    def __init__(self, ontology: Ontology = DEFAULT_ONTOLOGY):
        self.ontology = ontology

    def extract_expiration_date(self, text: str) -> Optional[str]:
        """Find the document's expiration date.

        Date rules are tried in priority order and the first capture of the
        first matching rule is returned as-is. Dates are not checked against
        the calendar.

        Args:
            text: Plain document text

        Returns:
            Matched date string, or None when no rule matches
        """
        for pattern in self.ontology.expiration_date_rules:
            match = pattern.search(text)
            if match and match.group(1):
                return match.group(1)
        return None

    def extract_insurance_fields(self, text: str) -> InsuranceFields:
        """Match each insurance field independently.

        Args:
            text: Plain document text

        Returns:
            InsuranceFields: Matched values, trimmed; unmatched fields are None
        """
        values: Dict[str, str] = {}
        for rule in self.ontology.insurance_field_rules:
            match = rule.pattern.search(text)
            # A capture of only whitespace counts as no match
            if match and match.group(1).strip():
                values[rule.field_name] = match.group(1).strip()

        LOGGER.debug(
            f"Matched {len(values)} insurance fields",
            extra={"fields": list(values)},
        )
        return InsuranceFields(**values)

    def extract(self, text: str) -> ExtractedFields:
        """Extract the expiration date together with the insurance fields."""
        fields = self.extract_insurance_fields(text)
        return ExtractedFields(
            expiration_date=self.extract_expiration_date(text),
            **fields.model_dump(),
        )
