from fastapi import APIRouter

from simplex_api.api.v1.models import router as models_router
from simplex_api.api.v1.remote import router as remote_router
from simplex_api.api.v1.solve import router as solve_router

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


router.include_router(models_router)
router.include_router(solve_router)
router.include_router(remote_router)
