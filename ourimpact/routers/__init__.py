# API routers package

from ourimpact.routers.auth import router as auth_router
from ourimpact.routers.cities import router as cities_router
from ourimpact.routers.comments import router as comments_router
from ourimpact.routers.likes import router as likes_router
from ourimpact.routers.resources import router as resources_router
from ourimpact.routers.temps import router as temps_router
from ourimpact.routers.users import router as users_router

__all__ = [
    "auth_router",
    "cities_router",
    "comments_router",
    "likes_router",
    "resources_router",
    "temps_router",
    "users_router",
]
