#!/usr/bin/env python3
"""
Notification Service

Tells volunteers when an administrator assigns them to, or removes them from,
an event. Messages go out synchronously through every enabled channel in the
notification config. Each send is attempted once; a failed send is logged and
counted, never raised, so it cannot undo the registration change that
triggered it.

Usage:
    from notification.service import NotificationService

    service = NotificationService(config.notifications)
    service.notify_assignment(volunteer_id, event_id, event)
"""

import logging
from typing import Dict, Optional

from core.config_loader import NotificationConfig
from core.matcher.models import Event
from notification.channels import NotificationChannelFactory
from notification.message_builder import NotificationMessage, NotificationMessageBuilder

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Sends assignment/removal notifications through configured channels.
    """

    def __init__(self, config: Optional[NotificationConfig] = None):
        self.config = config or NotificationConfig()

    @property
    def enabled(self) -> bool:
        return self.config.enabled and any(c.enabled for c in self.config.channels.values())

    def notify_assignment(self, volunteer_id: str, event_id: str, event: Optional[Event] = None) -> int:
        """
        Notify a volunteer about a new assignment.

        Returns:
            Number of channels that accepted the message
        """
        if not self.config.notify_on_assignment:
            return 0
        message = NotificationMessageBuilder.build_assignment(
            volunteer_id, event_id, event, self.config.base_url
        )
        return self.send(message)

    def notify_removal(self, volunteer_id: str, event_id: str, event: Optional[Event] = None) -> int:
        """
        Notify a volunteer that they were removed from an event.

        Returns:
            Number of channels that accepted the message
        """
        if not self.config.notify_on_removal:
            return 0
        message = NotificationMessageBuilder.build_removal(
            volunteer_id, event_id, event, self.config.base_url
        )
        return self.send(message)

    def send(self, message: NotificationMessage) -> int:
        """
        Send a message through every enabled channel.

        Returns:
            Number of successful sends
        """
        if not self.enabled:
            logger.debug(f"Notifications disabled; skipping {message.event_type} for {message.volunteer_id}")
            return 0

        results: Dict[str, bool] = {}
        for channel_type, channel_config in self.config.channels.items():
            if not channel_config.enabled:
                continue
            try:
                channel = NotificationChannelFactory.get_channel(channel_type)
            except ValueError as e:
                logger.error(f"Skipping notification channel: {e}")
                results[channel_type] = False
                continue

            if not channel.validate_config():
                logger.error(f"Notification channel {channel_type} is not configured; skipping")
                results[channel_type] = False
                continue

            recipient = channel_config.recipient or message.volunteer_id
            metadata = {
                'volunteer_id': message.volunteer_id,
                'event_id': message.event_id,
                'event_type': message.event_type,
                'link': message.link,
            }
            try:
                results[channel_type] = channel.send(recipient, message.subject, message.body, metadata)
            except Exception as e:
                # One broken channel must not stop delivery through the rest
                logger.error(f"Notification channel {channel_type} raised: {e}", exc_info=True)
                results[channel_type] = False

        sent = sum(1 for ok in results.values() if ok)
        failed = [name for name, ok in results.items() if not ok]
        if failed:
            logger.warning(
                f"Notification {message.event_type} for volunteer {message.volunteer_id} "
                f"failed on: {', '.join(failed)}"
            )
        else:
            logger.info(f"Sent {message.event_type} notification to volunteer {message.volunteer_id} via {sent} channel(s)")
        return sent
