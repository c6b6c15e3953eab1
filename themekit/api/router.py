from fastapi import APIRouter
from themekit.api import theme

router = APIRouter()
router.include_router(theme.router, prefix="/theme", tags=["Theme"])
