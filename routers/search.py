"""
Medicine search router
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import Optional

from database import get_db
from models import Catalog
from schemas import BrandedSearchResponse, GenericSearchResponse, SaltSearchResponse
from config import settings
from matching.cross_reference import cross_reference
from matching.resolver import resolve
from matching.store import get_store

router = APIRouter()

NOT_FOUND_SUGGESTION = "Please check the spelling or try a different search term"


def record_payload(record) -> dict:
    return {
        "name": record.name,
        "salt": record.salt,
        "contents": record.contents,
        "type": record.type,
        "packing": record.packing,
        "ptr": record.ptr,
        "mrp": record.mrp,
        "shipper_size": record.shipper_size,
    }


def require_name(name: Optional[str]) -> str:
    if not name or not name.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="name parameter is required"
        )
    return name.strip()


def not_found_response(catalog: Catalog) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": f"{catalog.value.capitalize()} medicine not found",
            "suggestion": NOT_FOUND_SUGGESTION
        }
    )


def search_catalog(db: Session, catalog: Catalog, name: str):
    """
    Resolve `name` in `catalog` and list same-salt records from the other catalog

    Returns:
        (match, counterparts), or None when nothing matches
    """
    match = resolve(get_store(db, catalog), name, threshold=settings.FUZZY_MATCH_THRESHOLD)
    if match is None:
        return None

    counterparts = cross_reference(match.record, get_store(db, catalog.other))
    return match, [
        {**record_payload(c.record), "savings": c.savings}
        for c in counterparts
    ]


@router.get("/branded", response_model=BrandedSearchResponse)
async def search_branded(
    name: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Find a branded medicine and its generic equivalents, cheapest first"""
    result = search_catalog(db, Catalog.BRANDED, require_name(name))
    if result is None:
        return not_found_response(Catalog.BRANDED)

    match, generics = result
    return {
        "branded": record_payload(match.record),
        "match": {"strategy": match.strategy, "score": match.score},
        "generics": generics,
        "total_generics": len(generics)
    }


@router.get("/generic", response_model=GenericSearchResponse)
async def search_generic(
    name: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Find a generic medicine and its branded alternatives, cheapest first"""
    result = search_catalog(db, Catalog.GENERIC, require_name(name))
    if result is None:
        return not_found_response(Catalog.GENERIC)

    match, branded = result
    return {
        "generic": record_payload(match.record),
        "match": {"strategy": match.strategy, "score": match.score},
        "branded_alternatives": branded,
        "total_branded": len(branded)
    }


@router.get("/salt", response_model=SaltSearchResponse)
async def search_salt(
    name: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Search both catalogs by (partial) active ingredient"""
    salt = require_name(name).upper()

    generics = get_store(db, Catalog.GENERIC).find_by_salt_contains(salt)
    branded = get_store(db, Catalog.BRANDED).find_by_salt_contains(salt)

    if not generics and not branded:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "No medicines found with this active ingredient"}
        )

    return {
        "salt": salt,
        "generics": [record_payload(g) for g in generics],
        "branded": [record_payload(b) for b in branded],
        "total_results": len(generics) + len(branded)
    }
