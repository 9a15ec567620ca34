# contenthub/api/endpoints/contact.py

import logging

from fastapi import APIRouter, Depends, HTTPException

from contenthub import schemas
from contenthub.api import deps
from contenthub.core.config import settings
from contenthub.core.mail import MailError, Mailer, send_contact_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
def contact(message: schemas.ContactMessage, mailer: Mailer = Depends(deps.get_mailer)):
    """Forward a contact form message by email. Nothing is stored."""
    try:
        send_contact_message(
            mailer,
            recipient=settings.CONTACT_EMAIL,
            name=message.name,
            email=message.email,
            subject=message.subject,
            message=message.message,
        )
    except MailError as e:
        logger.error(f"Error sending contact email: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to send message")
    return {"message": "Message sent successfully"}
