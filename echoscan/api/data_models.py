"""Package with data models for the API."""

from pydantic import BaseModel

from echoscan.data_models import AnalysisConfig


class HealthcheckResponse(BaseModel):
    """Response from the healthcheck endpoint indicating the status of the system."""

    is_healthy: bool


class AnalysisRequest(BaseModel):
    """API request for analyzing a text passed in a JSON body."""

    text: str
    options: AnalysisConfig = AnalysisConfig()


class ErrorResponse(BaseModel):
    """Response sent when a text cannot be analyzed."""

    detail: str
