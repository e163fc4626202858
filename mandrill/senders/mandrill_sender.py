import logging
from typing import Dict, Optional

from mandrill.api_clients.errors import MandrillError
from mandrill.api_clients.mandrill_client import MandrillClient
from mandrill.models.message import Message
from mandrill.senders.base_sender import BaseSender

logger = logging.getLogger(__name__)


class MandrillSender(BaseSender):
    def __init__(self, credentials: dict):
        self.api_key = credentials.get("api_key")
        if not self.api_key:
            raise ValueError("Mandrill requires 'api_key' in credentials")

        self.subaccount = credentials.get("subaccount")
        self.tags = list(credentials.get("tags") or [])
        self.client = MandrillClient(api_key=self.api_key, base_url=credentials.get("base_url"))

    def build_message(self, from_email: str, reply_to: Optional[str], to_email: str,
                      subject: str, html_body: str, text_body: Optional[str] = None,
                      headers: Optional[Dict[str, str]] = None,
                      from_name: Optional[str] = None) -> Message:
        msg = Message(
            html=html_body,
            text=text_body,
            subject=subject,
            from_email=from_email.strip(),
            from_name=from_name,
        ).add_recipient(to_email.strip())

        if reply_to:
            msg.add_header("Reply-To", reply_to)
        for key, value in (headers or {}).items():
            msg.add_header(key, value)
        if self.tags:
            msg.add_tags(*self.tags)
        if self.subaccount:
            msg.set_sub_account(self.subaccount)
        return msg

    def send(self, from_email: str, reply_to: Optional[str], to_email: str, subject: str,
             html_body: str, text_body: Optional[str] = None,
             headers: Optional[Dict[str, str]] = None,
             from_name: Optional[str] = None) -> bool:
        """
        Send a single email via Mandrill

        Returns True when Mandrill accepted every recipient (sent, queued
        or scheduled). Rejections and client errors are logged and reported
        as False.
        """
        msg = self.build_message(from_email, reply_to, to_email, subject,
                                 html_body, text_body, headers, from_name)
        try:
            results = self.client.send(msg)
        except MandrillError as e:
            logger.error(f"Mandrill send failed: {e}")
            return False

        rejected = [r for r in results if not r.accepted]
        for r in rejected:
            reason = f" ({r.rejection_reason})" if r.rejection_reason else ""
            logger.warning(f"Mandrill {r.status.value} {r.email}{reason}")
        if rejected or not results:
            return False

        logger.info(f"Mandrill email sent to {to_email}")
        return True
