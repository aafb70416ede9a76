"""
Notifications module.

Fan-out of collaborator activity and the per-user notification inbox.

Public API:
- INotificationService: Interface for notification operations
- Notification, NotificationType: notification records
"""

from .interfaces import INotificationService
from .models import Notification, NotificationType, NewNotification
from .repository import NotificationRepository
from .exceptions import NotificationNotFoundError

__all__ = [
    # Interface
    "INotificationService",
    # Models
    "Notification",
    "NotificationType",
    "NewNotification",
    # Repository
    "NotificationRepository",
    # Exceptions
    "NotificationNotFoundError",
]
