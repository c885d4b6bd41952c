"""Authenticated identity carried by a session token."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """The subject a verified bearer token speaks for."""

    user_id: str
    email: str
