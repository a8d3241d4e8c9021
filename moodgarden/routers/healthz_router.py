# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from moodgarden.models.database import get_db
from moodgarden.services.llm_space_service import is_configured

router = APIRouter()


@router.get("/healthz")
def health_check(db: Session = Depends(get_db)):
    result = {
        "db_connection": False,
        "ai_configured": is_configured(),
    }

    try:
        # ✅ Check DB read
        db.execute(text("SELECT 1"))
        result["db_connection"] = True
    except SQLAlchemyError as e:
        return {"status": "error", "error": str(e), "details": result}

    return {
        "status": "ok" if all(result.values()) else "partial",
        "details": result
    }
