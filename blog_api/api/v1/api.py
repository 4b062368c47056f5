from fastapi import APIRouter

from blog_api.api.v1.routes_auth import router as auth_router
from blog_api.api.v1.routes_blog import router as blog_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/user", tags=["user"])
api_router.include_router(blog_router, prefix="/blog", tags=["blog"])
