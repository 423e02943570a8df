"""
API client for communicating with the portfolio and blog backend.
"""

import requests
from typing import Dict, List, Any, Optional
from urllib.parse import urljoin
from portfolio.config import config


class ApiError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class ApiClient:
    """Client for interacting with the portfolio and blog API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, token: Optional[str] = None, timeout: int = 30):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            token: Admin session token, if logged in
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.token = token
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def _headers(self) -> Dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _request(self, method: str, endpoint: str, timeout: Optional[int] = None, **kwargs) -> Any:
        response = requests.request(
            method,
            self._url(endpoint),
            headers=self._headers(),
            timeout=timeout or self.timeout,
            **kwargs,
        )

        if response.status_code >= 400:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise ApiError(response.status_code, str(detail))

        return response.json()

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def get_portfolio(self) -> Dict[str, Any]:
        """Get the portfolio page content."""
        return self._request("GET", "portfolio")

    def login(self, password: str) -> str:
        """
        Log in as admin.

        Args:
            password: Admin password

        Returns:
            Session token (also kept on the client)
        """
        data = self._request("POST", "auth", json={"password": password})
        self.token = data["token"]
        return self.token

    def verify(self) -> bool:
        """Check whether the stored token is still a valid session."""
        if not self.token:
            return False
        try:
            self._request("GET", "auth/verify")
            return True
        except ApiError as e:
            if e.status_code == 401:
                self.token = None
                return False
            raise

    def logout(self) -> None:
        if self.token:
            try:
                self._request("POST", "auth/logout")
            finally:
                self.token = None

    def list_blogs(self, include_drafts: bool = False) -> List[Dict[str, Any]]:
        """
        List blog posts.

        Args:
            include_drafts: Include unpublished posts (needs an admin session)
        """
        params = {"all": "true"} if include_drafts else None
        return self._request("GET", "blogs", params=params)

    def get_blog(self, identifier: Any) -> Optional[Dict[str, Any]]:
        """Get a blog post by ID or slug. Returns None if it does not exist."""
        try:
            return self._request("GET", f"blogs/{identifier}")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise

    def create_blog(self, blog: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "blogs", json=blog)

    def update_blog(self, blog_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"blogs/{blog_id}", json=changes)

    def delete_blog(self, blog_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"blogs/{blog_id}")

    def upload_image(self, filename: str, data: bytes, content_type: str) -> Dict[str, Any]:
        """
        Upload an image for use in a post.

        Returns:
            Dictionary with url, public_id, width and height
        """
        return self._request(
            "POST",
            "upload",
            files={"file": (filename, data, content_type)},
            timeout=90,
        )

    def generate_from_youtube(self, url: str) -> Dict[str, Any]:
        """
        Draft a blog post from a YouTube video.

        Returns:
            Dictionary with title, slug, excerpt, content and cover_image
        """
        return self._request("POST", "ai/generate", json={"url": url}, timeout=300)
