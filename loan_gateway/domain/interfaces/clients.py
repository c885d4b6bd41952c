"""External client interfaces."""

from abc import ABC, abstractmethod


class EligibilityModelClient(ABC):
    """
    Abstract client for a generative text model.

    The model receives a fully formatted prompt and returns its raw
    text answer.
    """

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Generate a text completion for a prompt.

        Args:
            prompt: The prompt to send

        Returns:
            The model's text response, unmodified

        Raises:
            EligibilityModelException: If the call fails or no text comes back
        """
        ...
