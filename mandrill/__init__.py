"""
Client for Mandrill's transactional email API (https://mandrillapp.com/api/docs/).

Only message sending is covered: build a Message, then send it directly or
through a stored template.

    client = MandrillClient(api_key="xxxx")
    client.ping()  # raises if the key is wrong

    msg = new_message_to("recipient@domain.com", "Recipient")
    msg.html = "<p>HTML content</p>"
    msg.subject = "subject"
    msg.from_email = "email@domain.com"
    results = client.send(msg)

    results = client.send_template(new_message_to(email, name), "welcome", {"body": "Hi"})
"""

from mandrill.api_clients.errors import ApiError, MandrillError, TransportError, UnknownResponseError
from mandrill.api_clients.mandrill_client import MandrillClient
from mandrill.config import MandrillSettings, get_settings
from mandrill.models.message import (
    Attachment,
    MergeLanguage,
    Message,
    Recipient,
    RecipientMergeVars,
    RecipientMetadata,
    RecipientType,
    Variable,
    map_to_vars,
    new_message_to,
)
from mandrill.models.send_result import SendResult, SendStatus

__all__ = [
    "ApiError",
    "Attachment",
    "MandrillClient",
    "MandrillError",
    "MandrillSettings",
    "MergeLanguage",
    "Message",
    "Recipient",
    "RecipientMergeVars",
    "RecipientMetadata",
    "RecipientType",
    "SendResult",
    "SendStatus",
    "TransportError",
    "UnknownResponseError",
    "Variable",
    "get_settings",
    "map_to_vars",
    "new_message_to",
]
