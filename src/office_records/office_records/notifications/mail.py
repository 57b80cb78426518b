from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from email.message import EmailMessage
from smtplib import SMTP, SMTPException
from socket import timeout
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailSettings:
    host: str
    port: int
    sender: str
    enabled: bool = True
    base_url: str = "http://localhost:5000"


#connecting to SMTP server and sending message
def send_message(settings: MailSettings, msg: EmailMessage, receivers: Sequence[str]) -> Optional[str]:
    if not settings.enabled:
        logger.info('mail disabled, not sending "%s" to %s', msg["subject"], ", ".join(receivers))
        return None

    try:
        server = SMTP(host=settings.host, port=settings.port, local_hostname=None, timeout=5)
    except timeout:
        return "SMTP server not reachable"
    except (SMTPException, OSError) as e:
        return str(e)

    #sending message
    try:
        server.send_message(msg, from_addr=settings.sender, to_addrs=list(receivers))
    except (SMTPException, OSError) as e:
        server.close()
        return str(e)

    try:
        server.quit()
    except (SMTPException, OSError):
        # message already accepted, the server just hung up early
        server.close()
    return None


def _build(settings: MailSettings, receiver: str, subject: str, body: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = settings.sender
    msg["To"] = receiver
    msg["Date"] = datetime.now().strftime("%a, %d %b %Y %H:%M:%S")
    msg["Subject"] = subject
    msg.set_content(body)
    return msg


class Mailer:
    """Outgoing notifications; every send returns an error string or None and never raises."""

    def __init__(self, settings: MailSettings):
        self._settings = settings

    def _send(self, receiver: str, subject: str, body: str) -> Optional[str]:
        if not receiver:
            return "No receiver email"
        error = send_message(self._settings, _build(self._settings, receiver, subject, body), [receiver])
        if error:
            logger.warning('failed to send "%s" to %s: %s', subject, receiver, error)
        return error

    def admin_created(self, *, to: str, name: str, username: str, password: str, role: str) -> Optional[str]:
        body = (
            f"Dear {name},\n\n"
            f"You have been assigned the role of {role} in Office Management.\n"
            f"Username: {username}\n"
            f"Password: {password}\n\n"
            f"Log in at {self._settings.base_url}/api/auth/login and change your password immediately.\n"
        )
        return self._send(to, "Your Admin Account Details - Office Management", body)

    def admin_updated(self, *, to: str) -> Optional[str]:
        body = (
            "Dear Admin,\n\n"
            "Your Office Management account details have been updated.\n"
            "If you did NOT make this change, reset your password immediately.\n"
        )
        return self._send(to, "Your Admin Account Details Have Been Updated - Office Management", body)

    def admin_removed(self, *, to: str, name: str, role: str) -> Optional[str]:
        body = (
            f"Dear {name},\n\n"
            f"Your {role} access to Office Management has been removed.\n"
            "If you believe this is a mistake, please contact support.\n"
        )
        return self._send(to, "Your Admin Account Has Been Removed - Office Management", body)

    def leave_decided(
        self,
        *,
        to: str,
        employee_name: str,
        leave_id: str,
        leave_type: str,
        start_date,
        end_date,
        status: str,
        comment: Optional[str] = None,
    ) -> Optional[str]:
        body = f"""
        Leave ID: {leave_id}
        Name: {employee_name}
        Leave: {leave_type}
        Start date: {start_date}
        End date: {end_date}
        Status: {status}
        Comment: {comment or '-'}
        """
        return self._send(to, f"[{employee_name}] {leave_type} leave application {status}", body)
