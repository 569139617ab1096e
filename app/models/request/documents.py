"""Pydantic request models for document API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class AnalyzeDocumentRequest(BaseModel):
    """Request model for the document analysis endpoint.

    Attributes:
        text: Plain text already extracted from the source document
        document_id: Optional local name for the document in the semantic graph
    """

    text: str = Field(
        ...,
        description="Plain text of the document",
        examples=["Health insurance policy. Policy Number: HI-4821."],
    )
    document_id: Optional[str] = Field(
        default=None,
        description="Identifier appended to the document namespace to form the subject IRI",
        examples=["policy-4821"],
    )

    @field_validator("document_id")
    @classmethod
    def validate_document_id(cls, v: Optional[str]) -> Optional[str]:
        """Reject identifiers that cannot be used as an IRI local name.

        Args:
            v: Document identifier

        Returns:
            Optional[str]: Identifier, or None when blank

        Raises:
            ValueError: If the identifier contains whitespace
        """
        if v is None or not v.strip():
            return None
        if any(ch.isspace() for ch in v.strip()):
            raise ValueError("document_id must not contain whitespace")
        return v.strip()

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": (
                        "Health insurance policy. Policy Number: HI-4821. "
                        "Coverage Amount: $50,000. Valid until 12/31/2025."
                    ),
                    "document_id": "policy-4821",
                }
            ]
        }
    }
