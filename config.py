import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration"""

    # Flask Settings
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    PORT = int(os.environ.get('PORT', '5000'))
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Subscriber Store
    SUBSCRIBERS_FILE = os.environ.get('SUBSCRIBERS_FILE', os.path.join('data', 'subscribers.json'))

    # Admin Settings
    ADMIN_KEY = os.environ.get('ADMIN_KEY')

    # Email Transport (Resend)
    RESEND_API_KEY = os.environ.get('RESEND_API_KEY')
    RESEND_API_URL = os.environ.get('RESEND_API_URL', 'https://api.resend.com/emails')
    FROM_EMAIL = os.environ.get('FROM_EMAIL')  # must be a verified sender
    OPERATOR_EMAIL = os.environ.get('OPERATOR_EMAIL')  # visible recipient, defaults to FROM_EMAIL
    EMAIL_TIMEOUT_SECONDS = float(os.environ.get('EMAIL_TIMEOUT_SECONDS', '10'))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    # Tests inject their own secrets; never pick them up from the shell.
    ADMIN_KEY = None
    RESEND_API_KEY = None
    FROM_EMAIL = None
    OPERATOR_EMAIL = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])


@dataclass(frozen=True)
class NotifierSettings:
    """Secrets and transport settings resolved once at startup"""

    admin_key: str = ''
    resend_api_key: str = ''
    resend_api_url: str = 'https://api.resend.com/emails'
    from_email: str = ''
    operator_email: str = ''
    timeout: float = 10.0

    @classmethod
    def from_mapping(cls, cfg):
        from_email = (cfg.get('FROM_EMAIL') or '').strip()
        return cls(
            admin_key=cfg.get('ADMIN_KEY') or '',
            resend_api_key=(cfg.get('RESEND_API_KEY') or '').strip(),
            resend_api_url=cfg.get('RESEND_API_URL') or cls.resend_api_url,
            from_email=from_email,
            operator_email=(cfg.get('OPERATOR_EMAIL') or '').strip() or from_email,
            timeout=float(cfg.get('EMAIL_TIMEOUT_SECONDS') or cls.timeout),
        )

    @property
    def admin_configured(self):
        return bool(self.admin_key and self.admin_key.strip())

    @property
    def transport_configured(self):
        return bool(self.resend_api_key and self.from_email)
