"""
Liveness endpoint.

Reports whether the API is up and its store answers a trivial query.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from user_api.app.core.db import DbContext, get_db_context

router = APIRouter()


@router.get("/health")
async def health_check(context: DbContext = Depends(get_db_context)) -> Dict[str, str]:
    context.count()
    return {"status": "ok"}
