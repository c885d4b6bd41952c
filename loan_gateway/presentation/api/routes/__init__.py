from .auth import auth_router
from .eligibility import eligibility_router
from .health import health_router
from .loan import loan_router

__all__ = [
    "auth_router",
    "eligibility_router",
    "health_router",
    "loan_router",
]
