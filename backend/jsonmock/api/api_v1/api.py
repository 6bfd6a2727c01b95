from fastapi import APIRouter
from jsonmock.api.api_v1 import generate
from jsonmock.api.api_v1 import templates


api_router = APIRouter()

api_router.include_router(generate.router, prefix="", tags=["generate"])
api_router.include_router(templates.router, prefix="", tags=["templates"])
