"""
Client for the DuelLog REST API (matches and deck templates).
"""
import os
from typing import Optional

import requests

from .models import DeckTemplate, Match

DEFAULT_BASE_URL = "http://127.0.0.1:8080"


class DuelLogClient:
    """Thin wrapper over the match / deck-template endpoints."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10.0):
        """
        Initialize the client.

        Args:
            base_url: API root, defaults to $DUELLOG_API_BASE_URL
            timeout: Request timeout in seconds
        """
        self.base_url = (base_url or os.environ.get("DUELLOG_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "User-Agent": "DuelLog-Stats/1.0",
        })

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send a request and raise on HTTP errors."""
        response = self.session.request(
            method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs
        )
        response.raise_for_status()
        return response

    def health(self) -> bool:
        try:
            self._request("GET", "/health")
        except requests.RequestException:
            return False
        return True

    # ── Matches ─────────────────────────────────────────────────────────

    def get_matches(
        self,
        season_code: Optional[str] = None,
        mode: Optional[str] = None,
        my_deck_main: Optional[str] = None,
        opp_deck_main: Optional[str] = None,
        result: Optional[str] = None,
        play_order: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> list[Match]:
        """
        List matches, newest first.

        All filters are optional and applied server side.
        """
        params = {
            "seasonCode": season_code,
            "mode": mode,
            "myDeckMain": my_deck_main,
            "oppDeckMain": opp_deck_main,
            "result": result,
            "playOrder": play_order,
            "dateFrom": date_from,
            "dateTo": date_to,
        }
        params = {k: v for k, v in params.items() if v}

        data = self._request("GET", "/matches", params=params).json()
        return [Match.from_dict(m) for m in data.get("matches") or []]

    def create_match(self, payload: dict) -> str:
        """Create a match and return its new id."""
        data = self._request("POST", "/matches", json=payload).json()
        return data.get("id", "")

    def update_match(self, match_id: str, payload: dict) -> None:
        self._request("PATCH", f"/matches/{match_id}", json=payload)

    def delete_match(self, match_id: str) -> None:
        self._request("DELETE", f"/matches/{match_id}")

    # ── Deck templates ──────────────────────────────────────────────────

    def get_deck_templates(self) -> list[DeckTemplate]:
        data = self._request("GET", "/deck-templates").json()
        return [DeckTemplate.from_dict(t) for t in data.get("templates") or []]

    def create_deck_template(self, name: str, theme: str, deck_type: str = "main") -> str:
        payload = {"name": name, "theme": theme, "deckType": deck_type}
        data = self._request("POST", "/deck-templates", json=payload).json()
        return data.get("id", "")

    def update_deck_template(self, template_id: str, name: Optional[str] = None, theme: Optional[str] = None) -> None:
        payload = {k: v for k, v in {"name": name, "theme": theme}.items() if v is not None}
        self._request("PATCH", f"/deck-templates/{template_id}", json=payload)

    def delete_deck_template(self, template_id: str) -> None:
        self._request("DELETE", f"/deck-templates/{template_id}")

    def get_deck_theme_map(self) -> dict[str, str]:
        """Map deck name to display theme."""
        return {t.name: t.theme for t in self.get_deck_templates()}

    def close(self) -> None:
        self.session.close()
