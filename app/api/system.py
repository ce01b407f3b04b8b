# app/api/system.py

import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.config import get_settings
from app.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check():
    """Service health check"""
    return {"status": "healthy", "service": get_settings().app_name}


@router.get("/db-test")
def test_db(db: Session = Depends(get_db)):
    """Database connectivity check"""
    try:
        result = db.execute(text("SELECT 1"))
        return {"status": "connected", "result": result.scalar()}
    except SQLAlchemyError as e:
        logger.error("database check failed: %s", e)
        raise HTTPException(status_code=500, detail=f"database unavailable: {e}")
