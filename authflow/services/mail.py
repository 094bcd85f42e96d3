import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

MAILGUN_URL = "https://api.mailgun.net/v3/{domain}/messages"


class MailService:
    """
    Mailgun template mail sender.

    Sending never raises: transport failures are logged and reported as False,
    so account flows keep going when the mail provider is down.
    """

    def __init__(self, api_key=None, domain=None, from_email=None, timeout=None):
        self.api_key = api_key if api_key is not None else settings.MAILGUN_API_KEY
        self.domain = domain if domain is not None else settings.MAILGUN_DOMAIN
        self.from_email = from_email if from_email is not None else settings.MAILGUN_FROM_EMAIL
        self.timeout = timeout or settings.MAILGUN_TIMEOUT

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.domain)

    def send_email(self, subject: str, recipient: str, template: str, email_vars: dict) -> bool:
        if not self.configured:
            logger.info("Mail not configured, skipping %s email to %s", template, recipient)
            return False

        sender = self.from_email or f"no-reply@{self.domain}"
        data = {
            "from": f"Eats <{sender}>",
            "to": recipient,
            "subject": subject,
            "template": template,
        }
        for key, value in email_vars.items():
            data[f"v:{key}"] = value

        try:
            response = requests.post(
                MAILGUN_URL.format(domain=self.domain),
                auth=("api", self.api_key),
                data=data,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Failed to send %s email to %s: %s", template, recipient, exc)
            return False
        return True

    def send_verification_email(self, email: str, code: str) -> bool:
        return self.send_email(
            subject="Verify Your Email",
            recipient=email,
            template="verify-email",
            email_vars={"code": code, "username": email},
        )
