import logging
from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from deteksi.exceptions import AuthenticationError, IntegrationError, ServiceBusyError
from deteksi.models.gemini import TextSearchRequest, TextSearchResponse
from deteksi.services import gemini as gemini_service
from deteksi.services.gemini import SEARCH_FAILURE_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["text-search"])

MISSING_FIELDS_MESSAGE = "Query dan prompt diperlukan"


def _parse_request(payload: Any) -> TextSearchRequest | None:
    """Validate the raw JSON body; None when it is absent or malformed."""
    try:
        req = TextSearchRequest.model_validate(payload if payload is not None else {})
    except ValidationError:
        return None
    if not req.query or not req.query.strip() or not req.prompt or not req.prompt.strip():
        return None
    return req


@router.post("/text-search", response_model=TextSearchResponse)
def text_search(payload: Any = Body(None)):
    """Server-side text generation for the history search form."""
    req = _parse_request(payload)
    if req is None:
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_MESSAGE})
    try:
        result = gemini_service.generate_text(req.prompt)
    except ServiceBusyError as exc:
        return JSONResponse(status_code=503, content={"error": str(exc)})
    except (IntegrationError, AuthenticationError) as exc:
        logger.error("Error in text search: %s", exc)
        return JSONResponse(status_code=500, content={"error": SEARCH_FAILURE_MESSAGE})
    return TextSearchResponse(result=result)
