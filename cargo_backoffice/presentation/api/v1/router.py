"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from cargo_backoffice.presentation.api.v1.endpoints.health import router as health_router
from cargo_backoffice.presentation.api.v1.endpoints.cargo_manifests import router as cargo_manifests_router
from cargo_backoffice.presentation.api.v1.endpoints.weight_slips import router as weight_slips_router
from cargo_backoffice.presentation.api.v1.endpoints.master_status import router as master_status_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(cargo_manifests_router)
router.include_router(weight_slips_router)
router.include_router(master_status_router)
