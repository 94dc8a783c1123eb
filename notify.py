# notify.py
import smtplib
import threading
from email.message import EmailMessage

from flask import current_app

from config import Config
from errors import NotificationError


def compose_confirmation(booking, lab, sender):
    msg = EmailMessage()
    msg["Subject"] = f"Booking confirmed at {lab.name}"
    msg["From"] = sender
    msg["To"] = booking.email
    msg.set_content(
        f"Hello {booking.name},\n\n"
        f"Your slot at {lab.name} is booked for {booking.date.isoformat()} at {booking.time}.\n"
        f"Booking ID: {booking.id}\n\n"
        "Please carry a photo ID and any previous reports.\n"
    )
    return msg


def deliver(msg, mail_config):
    """Send one message over SMTP; any transport failure becomes NotificationError."""
    try:
        with smtplib.SMTP(mail_config["MAIL_HOST"], mail_config["MAIL_PORT"], timeout=10) as smtp:
            if mail_config.get("MAIL_USE_TLS", True):
                smtp.starttls()
            smtp.login(mail_config["MAIL_USER"], mail_config["MAIL_PASSWORD"])
            smtp.send_message(msg)
    except (smtplib.SMTPException, OSError) as exc:
        raise NotificationError(f"SMTP delivery failed: {exc}") from exc


def _prepare(booking, lab):
    mail_config = Config.get_mail_config(current_app.config)
    if mail_config is None:
        current_app.logger.debug("Mail not configured; skipping confirmation for booking %s", booking.id)
        return None, None
    if not booking.email:
        current_app.logger.debug("Booking %s has no email; skipping confirmation", booking.id)
        return None, None
    return compose_confirmation(booking, lab, mail_config["MAIL_FROM"]), mail_config


def _deliver_logged(msg, mail_config, logger, booking_id):
    try:
        deliver(msg, mail_config)
    except NotificationError as exc:
        logger.warning("Confirmation for booking %s not sent: %s", booking_id, exc.message)
        return False
    logger.info("Confirmation for booking %s sent to %s", booking_id, msg["To"])
    return True


def send_booking_confirmation(booking, lab):
    """Email the booking confirmation now. Returns True only if it was delivered."""
    msg, mail_config = _prepare(booking, lab)
    if msg is None:
        return False
    return _deliver_logged(msg, mail_config, current_app.logger, booking.id)


def dispatch_booking_confirmation(booking, lab):
    """Send the confirmation on a background thread and return the thread, or None if skipped.

    The message is built here, inside the request, so the thread never touches
    the database session.
    """
    msg, mail_config = _prepare(booking, lab)
    if msg is None:
        return None
    worker = threading.Thread(
        target=_deliver_logged,
        args=(msg, mail_config, current_app.logger, booking.id),
        name=f"mail-{booking.id}",
        daemon=True,
    )
    worker.start()
    return worker
