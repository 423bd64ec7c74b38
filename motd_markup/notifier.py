"""Webhook notifications for server wake-up and shutdown."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import ServerSettings
from .constants import (
    WEBHOOK_AVATAR_URL,
    WEBHOOK_EMBED_COLOR,
    WEBHOOK_TIMEOUT,
    WEBHOOK_USERNAME,
)

logger = logging.getLogger("motd_markup.notifier")


def build_payload(title: str) -> dict[str, Any]:
    """Build the webhook body for a single embed titled `title`."""
    return {
        "content": None,
        "embeds": [{"title": title, "color": WEBHOOK_EMBED_COLOR}],
        "username": WEBHOOK_USERNAME,
        "avatar_url": WEBHOOK_AVATAR_URL,
    }


class WebhookNotifier:
    """Posts status notices to the configured Discord-style webhook.

    Failures are logged rather than raised; a notice that cannot be delivered
    never interrupts the caller.

    Args:
        settings: Settings providing `discord_webhook_url`.
        client: HTTP client to use. A client is created per request when
            omitted.
    """

    def __init__(self, settings: ServerSettings, client: httpx.Client | None = None):
        self.settings = settings
        self.client = client

    def on_player_login(self, player_name: str) -> str | None:
        logger.info("[Discord] Sending waking up message")
        return self.send(build_payload(f"⏰ {player_name} woke up the server !"))

    def on_server_stop(self) -> str | None:
        logger.info("[Discord] Sending closing server message")
        return self.send(build_payload("💤 Server has shut down."))

    def send(self, payload: dict[str, Any]) -> str | None:
        """Post `payload` to the webhook.

        Args:
            payload: JSON-serializable body.

        Returns:
            str | None: Response body on success; None when no webhook is
                configured or delivery failed.
        """
        url = self.settings.discord_webhook_url
        if not url:
            logger.debug("[Discord] No webhook configured, skipping")
            return None

        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        try:
            if self.client is not None:
                response = self.client.post(url, json=payload, headers=headers)
            else:
                with httpx.Client(timeout=WEBHOOK_TIMEOUT) as client:
                    response = client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as error:
            logger.error("[Discord] Failed to send message: %s", error)
            return None

        if not response.is_success:
            logger.error(
                "[Discord] Webhook rejected message: %s %s",
                response.status_code,
                response.text[:200],
            )
            return None

        logger.info("[Discord] response: %s", response.text)
        return response.text
