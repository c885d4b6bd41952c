"""User entity representing a registered account."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class User:
    """
    A registered user.

    The password is only ever held as a one-way hash; the plaintext
    never reaches this entity.
    """

    name: str
    email: str
    password_hash: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
