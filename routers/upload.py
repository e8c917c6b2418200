"""
Catalog upload router
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status
from sqlalchemy.orm import Session
from typing import Optional

from database import get_db
from models import Catalog
from schemas import UploadResponse
from config import settings
from matching.ingestion import ingest_rows
from matching.store import get_store
from matching.tabular import CatalogFileError, read_catalog_rows

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{catalog}", response_model=UploadResponse)
async def upload_catalog_file(
    catalog: Catalog,
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """Upload a branded or generic price list (Excel or CSV)"""
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded. Please upload a file with field name 'file'"
        )

    try:
        contents = await file.read()
        if len(contents) > settings.MAX_UPLOAD_SIZE:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File size exceeds maximum allowed size of {settings.MAX_UPLOAD_SIZE / (1024*1024):.1f}MB"
            )

        try:
            rows = read_catalog_rows(file.filename, contents)
        except CatalogFileError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Error parsing file: {str(e)}"
            )

        logger.info("Parsed %d %s rows from %s", len(rows), catalog.value, file.filename)
        summary = ingest_rows(rows, get_store(db, catalog))
        db.commit()

        return {
            "success": True,
            "message": f"{catalog.value.capitalize()} medicines uploaded successfully",
            "stats": summary.to_dict()
        }

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Upload of %s catalog failed", catalog.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error processing file: {str(e)}"
        )
