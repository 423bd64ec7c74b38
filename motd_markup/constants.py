"""Constants used across the motd-markup package."""

from __future__ import annotations

import re

# Markup patterns
MARKER = "§"
SELECTORS = "0123456789abcdefklmnorABCDEFKLMNOR"
# The selector is captured so callers never have to guess the code kind.
CODE_PATTERN = re.compile(rf"{MARKER}([{SELECTORS}])")
HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")

# Settings and log locations
SETTINGS_FILE = "sleepingSettings.yml"
LOG_FILE = "latest.log"
LOG_TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"

# Webhook payload
WEBHOOK_USERNAME = "SleepingServerStarter"
WEBHOOK_AVATAR_URL = (
    "https://raw.githubusercontent.com/vincss/mcsleepingserverstarter/"
    "feature/discord_notification/docs/sleepingLogo.png"
)
WEBHOOK_EMBED_COLOR = 25344
WEBHOOK_TIMEOUT = 10.0

# 1x1 transparent PNG
DEFAULT_FAVICON = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
