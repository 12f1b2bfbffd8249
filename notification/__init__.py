"""
Notification Module

Assignment and removal notifications for volunteers, sent through pluggable
channels.

Usage:
    from notification import NotificationService, NotificationChannelFactory

    service = NotificationService(config.notifications)
    service.notify_assignment(volunteer_id, event_id, event)

    channel = NotificationChannelFactory.get_channel('webhook')
    channel.send('https://hooks.example.org/push', 'Subject', 'Body', {})
"""

from notification.channels import (
    NotificationChannel,
    WebhookChannel,
    InAppChannel,
    NotificationChannelFactory,
)

from notification.message_builder import (
    NotificationMessage,
    NotificationMessageBuilder,
)

from notification.service import NotificationService

__all__ = [
    # Channels
    'NotificationChannel',
    'WebhookChannel',
    'InAppChannel',
    'NotificationChannelFactory',
    # Messages
    'NotificationMessage',
    'NotificationMessageBuilder',
    # Service
    'NotificationService',
]
