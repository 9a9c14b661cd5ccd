from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lovematch import crud
from lovematch.api.deps import require_api_key
from lovematch.db import get_db
from lovematch.schemas.profile import ProfileStats

router = APIRouter(prefix="/profiles", tags=["profiles"], dependencies=[Depends(require_api_key)])


@router.get("/stats", response_model=ProfileStats)
def get_stats(db: Session = Depends(get_db)):
    return crud.profile_stats(db)
