"""
Utils Package - Subscriber storage, notifications, catalog and error types
"""

from .errors import (
    ServiceError,
    ValidationError,
    AuthorizationError,
    NotFoundError,
    ConfigurationError,
    TransportError
)
from .subscribers import Subscription, SubscriberStore
from .notifications import NotificationDispatcher, ResendTransport, render_html
from .catalog import PROJECTS, get_project, search_projects

__all__ = [
    # Errors
    'ServiceError',
    'ValidationError',
    'AuthorizationError',
    'NotFoundError',
    'ConfigurationError',
    'TransportError',

    # Subscribers
    'Subscription',
    'SubscriberStore',

    # Notifications
    'NotificationDispatcher',
    'ResendTransport',
    'render_html',

    # Catalog
    'PROJECTS',
    'get_project',
    'search_projects'
]
