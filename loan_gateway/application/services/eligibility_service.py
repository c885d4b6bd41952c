"""Eligibility service - delegates loan eligibility to a generative model."""

import structlog

from loan_gateway.core.metrics import record_eligibility_request
from loan_gateway.domain.exceptions import EligibilityModelException, ValidationException
from loan_gateway.domain.interfaces import EligibilityModelClient
from loan_gateway.application.dto import EligibilityRequest
from loan_gateway.application.dto.common import format_value

logger = structlog.get_logger(__name__)

PROMPT_TEMPLATE = """
Given the following details:
- Credit Score: {credit_score}
- Monthly Income: ₹{income}
- Loan Amount: ₹{loan_amount}
- Employment Status: {employment_status}

Based on Indian bank criteria, respond with only **"Eligible"** or **"Not Eligible"**.
"""


def build_prompt(request: EligibilityRequest) -> str:
    """Render the eligibility prompt for a request."""
    return PROMPT_TEMPLATE.format(
        credit_score=format_value(request.credit_score),
        income=format_value(request.income),
        loan_amount=format_value(request.loan_amount),
        employment_status=format_value(request.employment_status),
    )


class EligibilityService:
    """
    Application service for AI eligibility checks.

    The decision is made entirely by the model. Its answer is returned
    as-is, even when it is neither "Eligible" nor "Not Eligible".
    """

    def __init__(self, model_client: EligibilityModelClient):
        self._model = model_client

    async def assess(self, request: EligibilityRequest) -> str:
        """
        Ask the model whether the applicant is eligible.

        Raises:
            ValidationException: If any of the four fields is missing
            EligibilityModelException: If the model call fails
        """
        if request.validate():
            raise ValidationException("All fields are required for eligibility check")

        prompt = build_prompt(request)

        try:
            result = await self._model.generate(prompt)
        except EligibilityModelException:
            record_eligibility_request(success=False)
            raise

        record_eligibility_request(success=True)
        logger.info("eligibility_assessed", result_length=len(result))

        return result
