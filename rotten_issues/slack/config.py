"""Configuration for Slack integration."""

import os
from typing import Optional

from ..errors import ConfigurationError


class SlackConfig:
    """Configuration class for Slack API integration."""

    def __init__(self, bot_token: Optional[str] = None) -> None:
        """Initialize Slack configuration, falling back to environment variables."""
        self.bot_token: Optional[str] = bot_token or os.getenv("SLACK_TOKEN")

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.bot_token:
            raise ConfigurationError(
                "SLACK_TOKEN environment variable is required for Slack notifications"
            )
