"""
API routes for rendering annotated documentation of YAML data.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from yamldoc.descriptions.registry import get_description_registry
from yamldoc.document import SerializationError, render
from yamldoc.loader import LoadError, load_yaml

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/document", tags=["document"])


class DocumentRequest(BaseModel):
    """Data to document, with an optional description source."""

    value_yaml: str = Field(..., description="YAML text of the data tree (e.g. default configuration)")
    description_yaml: Optional[str] = Field(
        default=None,
        description="YAML text of the description tree",
    )
    description_key: Optional[str] = Field(
        default=None,
        description="Key of a stored description tree, used instead of description_yaml",
    )


class DocumentResponse(BaseModel):
    """Rendered documentation."""

    text: str
    description_key: Optional[str] = None


def _render_request(request: DocumentRequest) -> str:
    if request.description_yaml is not None and request.description_key is not None:
        raise HTTPException(
            status_code=422,
            detail="Provide either description_yaml or description_key, not both",
        )

    try:
        value = load_yaml(request.value_yaml, source="value_yaml")
        description = None
        if request.description_yaml is not None:
            description = load_yaml(request.description_yaml, source="description_yaml")
    except LoadError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if request.description_key is not None:
        registry = get_description_registry()
        description = registry.get(request.description_key)
        if description is None:
            raise HTTPException(
                status_code=404,
                detail=f"Description set '{request.description_key}' not found",
            )

    try:
        return render(value, description)
    except SerializationError as e:
        logger.warning(f"Render failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.post("", response_model=DocumentResponse)
async def document(request: DocumentRequest):
    """Render YAML data as an annotated listing."""
    text = _render_request(request)
    return DocumentResponse(text=text, description_key=request.description_key)


@router.post("/text", response_class=PlainTextResponse)
async def document_text(request: DocumentRequest):
    """
    Render YAML data as an annotated listing, returned as plain text.

    Use this endpoint to write the documentation straight to a file.
    """
    return PlainTextResponse(_render_request(request))
