from fastapi import APIRouter

from schemagenie.genie_api.routes.root import router as root_router
from schemagenie.genie_api.routes.generate_schema import router as generate_schema_router

router = APIRouter()

router.include_router(
    root_router,
    tags=["root"],
)

router.include_router(
    generate_schema_router,
    tags=["generation"],
)
