"""
Loan Gateway - User Auth, Loan Applications & AI Eligibility Service

A FastAPI-based service that handles user registration and login,
loan application workflow, and loan eligibility checks delegated
to a generative-AI model.
"""

__version__ = "0.1.0"
