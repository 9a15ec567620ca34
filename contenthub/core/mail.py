# contenthub/core/mail.py

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from jinja2 import Environment, select_autoescape
from markupsafe import Markup, escape

from contenthub.core.config import Settings

logger = logging.getLogger(__name__)


def nl2br(value: str) -> Markup:
    return Markup("<br>").join(escape(value).split("\n"))


_env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))
_env.filters["nl2br"] = nl2br

CONTACT_TEMPLATE = _env.from_string("""
<h3>New Contact Form Message</h3>
<p><strong>Name:</strong> {{ name }}</p>
<p><strong>Email:</strong> {{ email }}</p>
{% if subject %}<p><strong>Subject:</strong> {{ subject }}</p>{% endif %}
<p><strong>Message:</strong></p>
<p>{{ message | nl2br }}</p>
""")


class MailError(Exception):
    pass


class Mailer:
    """
    SMTP transport shared by the whole process.

    Built once at startup and closed at shutdown. Each send opens its own SMTP
    connection, so the instance holds configuration only and close() just
    refuses further sends.
    """

    def __init__(self, settings: Settings):
        self.server = settings.SMTP_SERVER
        self.port = settings.SMTP_PORT
        self.username = settings.SMTP_USERNAME
        self.password = settings.SMTP_PASSWORD.get_secret_value()
        self.use_tls = settings.SMTP_USE_TLS
        self.sender = settings.SENDER_EMAIL
        self.closed = False

    def send(self, recipient: str, subject: str, html_content: str, reply_to: Optional[str] = None):
        if self.closed:
            raise MailError("Mailer is closed")

        msg = MIMEMultipart()
        msg['From'] = self.sender
        msg['To'] = recipient
        msg['Subject'] = subject
        if reply_to:
            msg['Reply-To'] = reply_to
        msg.attach(MIMEText(html_content, 'html'))

        try:
            with smtplib.SMTP(self.server, self.port, timeout=30) as server:
                if self.use_tls:
                    server.starttls()
                if self.username:
                    server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending email to {recipient}: {e}")
            raise MailError(str(e)) from e

        logger.info(f"Email sent successfully to {recipient}")

    def close(self):
        self.closed = True
        logger.info("Mailer closed")


def render_contact_message(name: str, email: str, subject: Optional[str], message: str) -> str:
    return CONTACT_TEMPLATE.render(name=name, email=email, subject=subject, message=message)


def send_contact_message(
    mailer: Mailer,
    recipient: str,
    name: str,
    email: str,
    message: str,
    subject: Optional[str] = None,
):
    """Forward a contact form submission to the site's contact address."""
    html_content = render_contact_message(name, email, subject, message)
    title = f"Contact Form: {subject}" if subject else f"Contact Form Message from {name}"
    mailer.send(recipient, title, html_content, reply_to=email)
