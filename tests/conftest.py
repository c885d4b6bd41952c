"""
Shared test configuration.

Required settings are provided through the environment before any
application module reads them.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("GOOGLE_AI_API_KEY", "test-google-ai-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
