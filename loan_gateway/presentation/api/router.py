from fastapi import APIRouter

from .routes import auth_router, eligibility_router, health_router, loan_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(auth_router, tags=["Users"])
router.include_router(eligibility_router, tags=["Eligibility"])
router.include_router(loan_router, tags=["Loans"])
