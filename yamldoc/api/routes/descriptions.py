"""
Description API routes for browsing stored description trees.
"""

from typing import Any

from fastapi import APIRouter, HTTPException

from yamldoc.descriptions.registry import get_description_registry
from yamldoc.descriptions.schemas import DescriptionSummary

router = APIRouter(prefix="/descriptions", tags=["descriptions"])


@router.get("", response_model=list[DescriptionSummary])
async def list_descriptions():
    """List all stored description sets."""
    registry = get_description_registry()
    return registry.list_summaries()


@router.get("/{key}")
async def get_description(key: str) -> Any:
    """Get the raw description tree for a key."""
    registry = get_description_registry()
    desc_set = registry.get_set(key)
    if not desc_set:
        raise HTTPException(status_code=404, detail=f"Description set '{key}' not found")
    return desc_set.tree


@router.post("/reload")
async def reload_descriptions():
    """Force reload description sets from disk."""
    registry = get_description_registry()
    registry.reload()
    return {"reloaded": True, "count": registry.count()}
