# complaintdesk/routers/__init__.py

from .auth.auth_router import router as auth_router
from .support.complaint_router import router as complaint_router
from .homepage.homepage_router import router as homepage_router


__all__ = [
"auth_router",
"complaint_router",
"homepage_router",
]
