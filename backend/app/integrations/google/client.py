"""
Google OAuth Client

Builds the consent URL and exchanges an authorization code for the signed-in
user's profile. Only the profile is used; tokens are discarded.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any
from urllib.parse import urlencode

import httpx

from app.config import Settings, settings as default_settings
from app.exceptions import IdentityProviderError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoogleProfile:
    """Profile returned by the userinfo endpoint"""
    id: str
    email: str
    name: Optional[str]


class GoogleOAuthClient:
    """
    Google OAuth 2.0 authorization-code client.

    Any transport failure, non-2xx answer or profile without id/email raises
    IdentityProviderError.
    """

    SCOPES = [
        "https://www.googleapis.com/auth/userinfo.profile",
        "https://www.googleapis.com/auth/userinfo.email",
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: OAuth configuration, the application settings by default
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings or default_settings
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.OAUTH_TIMEOUT_SECONDS,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    def authorization_url(self) -> str:
        """URL of the Google consent screen"""
        params = {
            "redirect_uri": self.settings.oauth_redirect_uri,
            "client_id": self.settings.GOOGLE_CLIENT_ID,
            "access_type": "offline",
            "response_type": "code",
            "prompt": "consent",
            "scope": " ".join(self.SCOPES),
        }
        return f"{self.settings.GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def fetch_profile(self, code: str) -> GoogleProfile:
        """Exchange an authorization code and fetch the user's profile"""
        if not code:
            raise IdentityProviderError("Missing authorization code")

        access_token = await self._exchange_code(code)
        data = await self._request(
            "GET",
            self.settings.GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
        )

        user_id = data.get("id")
        email = data.get("email")
        if not user_id or not email:
            logger.warning(f"Google profile without id/email: keys={sorted(data)}")
            raise IdentityProviderError("Identity provider returned an incomplete profile")

        return GoogleProfile(id=str(user_id), email=email, name=data.get("name"))

    async def _exchange_code(self, code: str) -> str:
        data = await self._request(
            "POST",
            self.settings.GOOGLE_TOKEN_URL,
            data={
                "code": code,
                "client_id": self.settings.GOOGLE_CLIENT_ID,
                "client_secret": self.settings.GOOGLE_CLIENT_SECRET,
                "redirect_uri": self.settings.oauth_redirect_uri,
                "grant_type": "authorization_code",
            },
        )
        access_token = data.get("access_token")
        if not access_token:
            logger.warning(f"Token exchange answered without access_token: {data.get('error')}")
            raise IdentityProviderError("Identity provider did not issue an access token")
        return access_token

    async def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        client = await self.get_client()
        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Google OAuth {method} {url} failed with {e.response.status_code}")
            raise IdentityProviderError(
                f"Identity provider answered {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Google OAuth {method} {url} failed: {e}")
            raise IdentityProviderError("Identity provider is unreachable") from e
        except ValueError as e:
            raise IdentityProviderError("Identity provider returned malformed JSON") from e

        if not isinstance(data, dict):
            raise IdentityProviderError("Identity provider returned an unexpected payload")
        return data
