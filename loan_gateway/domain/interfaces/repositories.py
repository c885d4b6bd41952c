"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from loan_gateway.domain.entities import Loan, LoanStatus, User


class UserRepository(ABC):
    """
    Abstract repository for User persistence.

    Implementations may use PostgreSQL, SQLite, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Persist a new user.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            DuplicateEmailException: If the email is already taken
        """
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by email.

        Args:
            email: The exact email address

        Returns:
            The user if found, None otherwise
        """
        ...

    @abstractmethod
    async def list_all(self) -> List[User]:
        """Retrieve every user, oldest first."""
        ...


class LoanRepository(ABC):
    """
    Abstract repository for Loan persistence.

    Implementations may use PostgreSQL, SQLite, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, loan: Loan) -> Loan:
        """
        Persist a new loan application.

        Args:
            loan: The loan to save

        Returns:
            The saved loan
        """
        ...

    @abstractmethod
    async def list_all(self) -> List[Loan]:
        """Retrieve every loan, oldest first."""
        ...

    @abstractmethod
    async def update_status(self, loan_id: str, status: LoanStatus) -> Optional[Loan]:
        """
        Set the status of a loan.

        Args:
            loan_id: The loan's unique identifier
            status: The new status

        Returns:
            The updated loan if found, None otherwise
        """
        ...
