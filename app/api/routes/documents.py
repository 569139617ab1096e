"""Document analysis API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_document_analyzer, get_reference_date
from app.models.request.documents import AnalyzeDocumentRequest
from app.models.response.response import AnalyzeDocumentResponse, ErrorResponse
from app.services.ontology import DocumentAnalyzer
from app.utils.exceptions import EmptyDocumentError
from app.utils.logging import get_logger

LOGGER = get_logger(__name__)

router = APIRouter()


def ensure_text(text: str) -> str:
    """Reject documents without any text.

    Args:
        text: Document text

    Returns:
        str: The unchanged text

    Raises:
        EmptyDocumentError: If the text is empty or whitespace only
    """
    if not text or not text.strip():
        raise EmptyDocumentError("No text found in the document.")
    return text


@router.post(
    "/analyze",
    response_model=AnalyzeDocumentResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Document analyzed successfully",
            "model": AnalyzeDocumentResponse,
        },
        422: {
            "description": "Document has no text",
            "model": ErrorResponse,
        },
    },
    summary="Classify and verify document text",
    description=(
        "Classify plain document text, extract the expiration date and "
        "insurance fields, score confidence and build the semantic graph."
    ),
    operation_id="analyze_document_text_with_ontology",
)
async def analyze_document(
    request: AnalyzeDocumentRequest,
    analyzer: Annotated[DocumentAnalyzer, Depends(get_document_analyzer)],
    as_of: Annotated[date, Depends(get_reference_date)],
) -> AnalyzeDocumentResponse:
    """Run the ontology pipeline over a document's text.

    Args:
        request: Document text and optional document id
        analyzer: Injected document analyzer
        as_of: Injected reference date for the expiration status

    Returns:
        AnalyzeDocumentResponse: Ontology output under ``ontology_validation``

    Raises:
        HTTPException: If the document has no text
    """
    try:
        text = ensure_text(request.text)
    except EmptyDocumentError as e:
        LOGGER.warning(
            "Rejected empty document",
            extra={"document_id": request.document_id},
        )
        raise HTTPException(
            status_code=422,
            detail={
                "error": "EmptyDocumentError",
                "message": "No text found in the document",
                "detail": str(e),
            },
        ) from e

    LOGGER.info(
        "Received document analysis request",
        extra={"document_id": request.document_id, "text_length": len(text)},
    )

    result = analyzer.analyze(text, document_id=request.document_id, as_of=as_of)

    LOGGER.info(
        "Document analysis completed",
        extra={
            "document_id": request.document_id,
            "document_class": result.document_class,
            "confidence": result.initial_confidence.score,
            "rdf_triples": result.rdf_triples,
        },
    )

    return AnalyzeDocumentResponse(ontology_validation=result)
