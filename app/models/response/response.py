from typing import Optional

from pydantic import BaseModel, Field

from app.models.ontology_models import OntologyValidation


class HealthCheckResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Service status
        version: Application version
        service: Service name
    """

    status: str = Field(
        default="healthy",
        description="Service health status",
        examples=["healthy", "unhealthy"],
    )
    version: str = Field(
        ...,
        description="Application version",
        examples=["0.1.0"],
    )
    service: str = Field(
        ...,
        description="Service name",
        examples=["Insurance Document Verification - Ontology Service"],
    )


class AnalyzeDocumentResponse(BaseModel):
    """Document analysis response model.

    The ontology output sits under its own key so that callers can merge
    model-generated fields at the top level without collisions.

    Attributes:
        ontology_validation: Classification, fields, confidence and graph
    """

    ontology_validation: OntologyValidation = Field(
        ...,
        description="Output of the ontology pipeline",
    )


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes:
        error: Error type/category
        message: Human-readable error message
        detail: Optional detailed error information
    """

    error: str = Field(
        ...,
        description="Error type or category",
        examples=["EmptyDocumentError"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["No text found in the document"],
    )
    detail: Optional[str] = Field(
        default=None,
        description="Detailed error information",
    )
