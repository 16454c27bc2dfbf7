"""Slack client for posting the rottening issues report."""

import logging
from collections.abc import Sequence
from typing import Any, Dict, List, Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

from ..errors import NotifyError
from ..rot.formatter import WeeklyReport
from .config import SlackConfig

logger = logging.getLogger(__name__)

NEXT_BATCH_PRETEXT = "*Next batch of newer but still rottening issues: *"


class SlackClient:
    """Client for sending the weekly report to a Slack channel."""

    def __init__(self, config: Optional[SlackConfig] = None) -> None:
        """Initialize Slack client with configuration."""
        self.config = config or SlackConfig()
        self._bot_client: Optional[WebClient] = None

    @property
    def bot_client(self) -> WebClient:
        """Get or create Slack WebClient instance for bot token (posting messages)."""
        if self._bot_client is None:
            self.config.validate()
            self._bot_client = WebClient(
                token=self.config.bot_token, retry_handlers=[]
            )
        return self._bot_client

    def build_attachments(self, texts: Sequence[str]) -> List[Dict[str, Any]]:
        """
        Turn issue listing blocks into Slack attachments.

        Every attachment after the first is introduced with a pretext.

        Args:
            texts: Issue listing blocks, in order

        Returns:
            List of legacy Slack attachments with mrkdwn enabled
        """
        attachments: List[Dict[str, Any]] = []
        for index, text in enumerate(texts):
            attachment: Dict[str, Any] = {"text": text, "mrkdwn_in": ["text"]}
            if index > 0:
                attachment["pretext"] = NEXT_BATCH_PRETEXT
            attachments.append(attachment)
        return attachments

    def post_report(self, channel: str, report: WeeklyReport) -> None:
        """
        Post the weekly report as a single message.

        Args:
            channel: Channel name or ID to post to
            report: The formatted report

        Raises:
            NotifyError: If Slack rejects the message or cannot be reached
        """
        attachments = self.build_attachments(report.attachments)
        logger.debug(
            "Posting report to %s with %d attachments", channel, len(attachments)
        )

        try:
            response = self.bot_client.chat_postMessage(
                channel=channel,
                text=report.text,
                attachments=attachments,
                mrkdwn=True,
            )
        except SlackApiError as e:
            raise NotifyError(
                f"Slack rejected the message to {channel}: "
                f"{e.response.get('error', e)}"
            ) from e
        except (SlackClientError, OSError) as e:
            raise NotifyError(f"Could not post the message to {channel}: {e}") from e

        if not response["ok"]:
            raise NotifyError(
                f"Slack rejected the message to {channel}: {response.get('error')}"
            )

        logger.info("Posted report to %s", channel)
