"""
Notifications Module - Project update broadcasts over the Resend email API
"""

import hmac
import logging

import requests

from .errors import (
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
    TransportError,
    ValidationError
)


def render_html(message):
    """HTML body for a broadcast: newlines become line breaks, nothing is escaped"""
    return '<p>' + message.replace('\n', '<br/>') + '</p>'


class ResendTransport:
    """Sends one email through the Resend HTTP API"""

    def __init__(self, api_key, api_url='https://api.resend.com/emails', timeout=10):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout

    def send(self, sender, to, bcc, subject, text, html):
        """
        Send an email

        Args:
            sender (str): Verified sending address
            to (list): Visible recipients
            bcc (list): Blind-copy recipients
            subject (str): Email subject
            text (str): Plain-text body
            html (str): HTML body

        Returns:
            dict: Provider response, including the message id

        Raises:
            TransportError: On timeout, connection failure or a provider error
        """
        payload = {
            'from': sender,
            'to': to,
            'bcc': bcc,
            'subject': subject,
            'text': text,
            'html': html
        }
        headers = {
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json'
        }

        try:
            response = requests.post(self.api_url, json=payload, headers=headers, timeout=self.timeout)
        except requests.Timeout as e:
            raise TransportError('Failed to send update email.',
                                 details={'error': f'timed out after {self.timeout}s'}) from e
        except requests.RequestException as e:
            raise TransportError('Failed to send update email.', details={'error': str(e)}) from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.ok:
            error = data if data is not None else (response.text or f'HTTP {response.status_code}')
            raise TransportError('Failed to send update email.', details={'error': error})
        if data is None:
            raise TransportError('Failed to send update email.',
                                 details={'error': 'invalid response from email provider'})
        return data


class NotificationDispatcher:
    """
    Authorizes and executes project update broadcasts

    Args:
        settings (NotifierSettings): Secrets resolved at startup
        store (SubscriberStore): Where subscribers are looked up
        transport: Object with a ``send(sender, to, bcc, subject, text, html)``
            method, or None when email sending is not configured
        logger: Where broadcasts are logged, defaults to this module's logger
    """

    def __init__(self, settings, store, transport=None, logger=None):
        self.settings = settings
        self.store = store
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

    def authorize(self, credential):
        if not self.settings.admin_configured:
            self.logger.warning("ADMIN_KEY not set; refusing to send updates for safety.")
            raise ConfigurationError('ADMIN_KEY not configured on server.')

        supplied = (credential or '').encode('utf-8')
        if not hmac.compare_digest(supplied, self.settings.admin_key.encode('utf-8')):
            raise AuthorizationError('Unauthorized: invalid admin key')

    def broadcast_update(self, project_id, subject, message, credential):
        """
        Email one update to every subscriber of a project

        Subscribers are addressed as bcc; the operator is the visible recipient.
        The subscriber list is never modified here.

        Returns:
            dict: ``{'ok': True, 'sentTo': <count>, 'message': ...}``
        """
        self.authorize(credential)

        if not all(isinstance(v, str) and v.strip() for v in (project_id, subject, message)):
            raise ValidationError('projectId, subject and message are required')
        project_id = project_id.strip()

        if self.transport is None or not self.settings.transport_configured:
            raise ConfigurationError(
                'Email sending is not configured. Make sure RESEND_API_KEY and FROM_EMAIL are set.')

        recipients = self.store.find_by_project(project_id)
        if not recipients:
            raise NotFoundError(f'No subscribers found for projectId="{project_id}".')

        emails = [s.email for s in recipients]
        self.logger.info(f'Sending project update for "{project_id}" to {len(emails)} subscribers.')

        try:
            data = self.transport.send(
                sender=self.settings.from_email,
                to=[self.settings.operator_email],
                bcc=emails,
                subject=subject,
                text=message,
                html=render_html(message)
            )
        except TransportError as e:
            self.logger.error(f"Email provider rejected update for {project_id}: {e.details.get('error')}")
            raise

        self.logger.info(f"Email provider response: {data}")
        return {
            'ok': True,
            'sentTo': len(emails),
            'message': 'Update email sent to subscribers.'
        }


__all__ = ['ResendTransport', 'NotificationDispatcher', 'render_html']
