"""
Mail adapter - outgoing email over SMTP.

Only the password reset flow sends mail; delivery problems are reported as a
False return value and logged, never raised.
"""

import logging
import smtplib
from email.mime.text import MIMEText

from app.config import settings

logger = logging.getLogger("foodorder.mail")


def send_mail(to: str, subject: str, body: str) -> bool:
    """
    Send a plain-text email.

    Args:
        to: Recipient email address
        subject: Subject line
        body: Plain-text body

    Returns:
        bool: True if the relay accepted the message, False otherwise
    """
    message = MIMEText(body, "plain")
    message["From"] = settings.smtp_sender
    message["To"] = to
    message["Subject"] = subject

    try:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=10) as server:
            if settings.smtp_use_tls:
                server.starttls()
            if settings.smtp_username and settings.smtp_password:
                server.login(settings.smtp_username, settings.smtp_password)
            server.send_message(message)

        logger.info(f"Email sent to {to} subject={subject!r}")
        return True

    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"SMTP error sending email to {to}: {e}")
        return False
