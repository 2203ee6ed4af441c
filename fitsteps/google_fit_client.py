"""
Google Fit API client for retrieving the daily step count.
"""

import logging
from datetime import datetime
from typing import Optional

import requests
from google.auth import exceptions as google_auth_exceptions

from .aggregation import build_aggregate_request, compute_time_window, extract_step_count
from .errors import AuthError, MalformedResponse, TransportError
from .interfaces import CredentialProvider
from .models import AggregateRequest, AggregateResponse
from .oauth_manager import create_oauth_manager

logger = logging.getLogger(__name__)

# The authenticated user; other users cannot be queried.
CURRENT_USER = "me"


class GoogleFitClient:
    """Client for the Google Fitness API aggregate endpoint."""

    BASE = "https://www.googleapis.com/fitness/v1"

    def __init__(self, session: requests.Session):
        self.session = session

    def aggregate(self, request: AggregateRequest) -> AggregateResponse:
        url = f"{self.BASE}/users/{CURRENT_USER}/dataset:aggregate"
        try:
            response = self.session.post(url, json=request.to_body())
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Aggregate request to {url} failed: {e}") from e
        except google_auth_exceptions.RefreshError as e:
            raise AuthError(f"Google token refresh failed: {e}") from e
        except google_auth_exceptions.TransportError as e:
            raise TransportError(f"Google token endpoint unreachable: {e}") from e

        try:
            return AggregateResponse.model_validate(response.json())
        except ValueError as e:
            raise MalformedResponse("body", f"Aggregate response body is not valid: {e}") from e

    def get_daily_steps(self, now: Optional[datetime] = None) -> int:
        """Total steps taken between local midnight and ``now``."""
        window = compute_time_window(now)
        logger.info(
            f"Requesting steps from {window.start_millis} to {window.end_millis} "
            f"({window.duration_millis} ms)"
        )
        steps = extract_step_count(self.aggregate(build_aggregate_request(window)))
        logger.debug(f"Aggregate response contained {steps} steps")
        return steps


def create_google_fit_client(credential_provider: Optional[CredentialProvider] = None) -> GoogleFitClient:
    """Factory function to create Google Fit client."""
    provider = credential_provider or create_oauth_manager()
    return GoogleFitClient(provider.get_authorized_session())
