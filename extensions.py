"""
Extensions Module - Centralized initialization of the notifier components
Builds the subscriber store and notification dispatcher once per application
and keeps them on ``app.extensions`` so route handlers never read global state.
"""

from flask import current_app
from flask_cors import CORS

from config import NotifierSettings
from utils.notifications import NotificationDispatcher, ResendTransport
from utils.subscribers import SubscriberStore

cors = CORS()


def init_notifier(app, transport=None):
    """
    Attach a SubscriberStore and NotificationDispatcher to the app

    Args:
        app (Flask): Application instance
        transport: Optional email transport; a ResendTransport is built from
            config when omitted and credentials are present
    """
    settings = NotifierSettings.from_mapping(app.config)
    store = SubscriberStore(app.config['SUBSCRIBERS_FILE'], logger=app.logger)

    if transport is None and settings.resend_api_key:
        transport = ResendTransport(settings.resend_api_key,
                                    api_url=settings.resend_api_url,
                                    timeout=settings.timeout)

    app.extensions['subscriber_store'] = store
    app.extensions['notifier'] = NotificationDispatcher(settings, store, transport, logger=app.logger)
    return app.extensions['notifier']


def get_store():
    return current_app.extensions['subscriber_store']


def get_dispatcher():
    return current_app.extensions['notifier']


__all__ = ['cors', 'init_notifier', 'get_store', 'get_dispatcher']
