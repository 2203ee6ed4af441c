"""
OAuth manager for the Google Fitness API installed-app flow.
"""

import logging
import os
from typing import Optional

import requests
from google.auth.exceptions import GoogleAuthError, RefreshError
from google.auth.transport.requests import AuthorizedSession, Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from .config import Settings, load_settings
from .errors import AuthError

logger = logging.getLogger(__name__)

# Deleting the token cache is required after changing these.
SCOPES = ["https://www.googleapis.com/auth/fitness.activity.read"]


class OAuthManager:
    """Obtains Google credentials and caches the token on disk between runs."""

    def __init__(self, settings: Settings):
        self.client_secret_path = settings.client_secret_path
        self.token_path = settings.token_path
        self.credentials: Optional[Credentials] = None

    def authenticate(self) -> Credentials:
        """Run the browser consent flow and persist the resulting token."""
        flow = InstalledAppFlow.from_client_secrets_file(self.client_secret_path, SCOPES)
        logger.info("Opening the browser to authorize read access to Google Fit activity data")
        credentials = flow.run_local_server(port=0)
        self._save_tokens(credentials)
        return credentials

    def refresh_token(self, credentials: Credentials) -> Credentials:
        """Refresh an expired access token, falling back to consent if it is rejected."""
        try:
            credentials.refresh(Request())
        except RefreshError as e:
            logger.warning(f"Google token refresh rejected, re-authenticating: {e}")
            return self.authenticate()
        self._save_tokens(credentials)
        logger.info("Google Fit token refreshed")
        return credentials

    def _load_cached_tokens(self) -> Optional[Credentials]:
        if not os.path.exists(self.token_path):
            return None
        return Credentials.from_authorized_user_file(self.token_path, SCOPES)

    def _save_tokens(self, credentials: Credentials) -> None:
        with open(self.token_path, 'w') as file:
            file.write(credentials.to_json())
        logger.info(f"Saved Google token to {self.token_path}")

    def ensure_valid_token(self) -> Credentials:
        """Return valid credentials from the cache, a refresh, or the consent flow."""
        try:
            credentials = self._load_cached_tokens()
            if credentials and credentials.valid:
                logger.debug(f"Using cached Google token from {self.token_path}")
            elif credentials and credentials.expired and credentials.refresh_token:
                credentials = self.refresh_token(credentials)
            else:
                credentials = self.authenticate()
        except (GoogleAuthError, OAuth2Error, requests.exceptions.RequestException, ValueError, OSError) as e:
            raise AuthError(f"Failed to authenticate with Google: {e}") from e

        self.credentials = credentials
        return credentials

    def get_authorized_session(self) -> AuthorizedSession:
        """HTTP session that attaches the bearer token to every request."""
        return AuthorizedSession(self.ensure_valid_token())


def create_oauth_manager(settings: Optional[Settings] = None) -> OAuthManager:
    """Create OAuth manager, loading settings from the environment if not given."""
    return OAuthManager(settings or load_settings())
