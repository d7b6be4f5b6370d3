from fastapi import APIRouter

from vaxplan.domains.vaccination.api import routes as vaccination

api_router = APIRouter()

# All routes get the /api/v1 prefix from the app factory
api_router.include_router(vaccination.router)
