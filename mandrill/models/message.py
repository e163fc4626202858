import base64
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipientType(str, Enum):
    TO = "to"
    CC = "cc"
    BCC = "bcc"


class MergeLanguage(str, Enum):
    MAILCHIMP = "mailchimp"
    HANDLEBARS = "handlebars"


class Variable(BaseModel):
    """One piece of dynamic content: a merge var or a template region."""
    name: str
    content: Any = None


def map_to_vars(data: Mapping[str, Any]) -> List[Variable]:
    """Converts a mapping into the list of name/content pairs the API expects."""
    return [Variable(name=k, content=v) for k, v in data.items()]


class Recipient(BaseModel):
    email: str
    name: Optional[str] = None
    type: RecipientType = RecipientType.TO


class RecipientMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipient: str = Field(alias="rcpt")
    values: Dict[str, Any] = {}


class RecipientMergeVars(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipient: str = Field(alias="rcpt")
    vars: List[Variable] = []


class Attachment(BaseModel):
    """
    A file sent along with the message.

    `content` holds the base64 text that goes on the wire; use
    `from_bytes` to build one from raw file data.
    """
    model_config = ConfigDict(populate_by_name=True)

    mime_type: str = Field(alias="type")
    name: str
    content: str

    @classmethod
    def from_bytes(cls, data: bytes, name: str, mime_type: str) -> "Attachment":
        return cls(
            mime_type=mime_type,
            name=name,
            content=base64.b64encode(data).decode("ascii"),
        )


class Message(BaseModel):
    """
    An outbound Mandrill message.

    Every builder method mutates the message and returns it, so calls can
    be chained:

        msg = (Message(subject="Hi", html="<p>Hi</p>")
               .add_recipient("a@example.com", "A")
               .add_tags("welcome"))

    Unset optional fields are left as None and dropped by `to_payload`.
    """
    model_config = ConfigDict(populate_by_name=True)

    html: Optional[str] = None
    text: Optional[str] = None
    subject: Optional[str] = None
    from_email: Optional[str] = None
    from_name: Optional[str] = None
    to: List[Recipient] = Field(default_factory=list)
    important: Optional[bool] = None
    track_opens: Optional[bool] = None
    track_clicks: Optional[bool] = None
    preserve_recipients: Optional[bool] = None
    merge: Optional[bool] = None
    global_merge_vars: Optional[List[Variable]] = None
    merge_vars: Optional[List[RecipientMergeVars]] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    recipient_metadata: Optional[List[RecipientMetadata]] = None
    subaccount: Optional[str] = None
    attachments: Optional[List[Attachment]] = None
    images: Optional[List[Attachment]] = None
    headers: Optional[Dict[str, str]] = None
    merge_language: Optional[MergeLanguage] = None

    @classmethod
    def with_recipient(cls, email: str, name: Optional[str] = None) -> "Message":
        return cls().add_recipient(email, name)

    def add_recipient(self, email: str, name: Optional[str] = None) -> "Message":
        return self.add_recipient_with_type(email, name, RecipientType.TO)

    def add_recipient_with_type(self, email: str, name: Optional[str],
                                type: RecipientType) -> "Message":
        self.to.append(Recipient(email=email, name=name or None, type=RecipientType(type)))
        return self

    def add_global_merge_var(self, name: str, value: Any) -> "Message":
        return self.add_global_merge_vars({name: value})

    def add_global_merge_vars(self, data: Mapping[str, Any]) -> "Message":
        if self.global_merge_vars is None:
            self.global_merge_vars = []
        self.global_merge_vars.extend(map_to_vars(data))
        return self

    def add_recipient_merge_vars(self, recipient: str, data: Mapping[str, Any]) -> "Message":
        if self.merge_vars is None:
            self.merge_vars = []
        self.merge_vars.append(RecipientMergeVars(recipient=recipient, vars=map_to_vars(data)))
        return self

    def add_tags(self, *tags: str) -> "Message":
        if self.tags is None:
            self.tags = []
        self.tags.extend(tags)
        return self

    def add_metadata_field(self, key: str, value: Any) -> "Message":
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value
        return self

    def add_recipient_metadata(self, recipient: str, values: Mapping[str, Any]) -> "Message":
        # Entries for the same recipient are not merged.
        if self.recipient_metadata is None:
            self.recipient_metadata = []
        self.recipient_metadata.append(RecipientMetadata(recipient=recipient, values=dict(values)))
        return self

    def set_sub_account(self, name: str) -> "Message":
        self.subaccount = name
        return self

    def set_merge_language(self, language: str) -> "Message":
        try:
            self.merge_language = MergeLanguage(language)
        except ValueError:
            raise ValueError(f"Unsupported merge language: {language!r}") from None
        return self

    def add_attachment(self, data: bytes, name: str, mime_type: str) -> "Message":
        if self.attachments is None:
            self.attachments = []
        self.attachments.append(Attachment.from_bytes(data, name, mime_type))
        return self

    def add_image(self, data: bytes, name: str, mime_type: str) -> "Message":
        if self.images is None:
            self.images = []
        self.images.append(Attachment.from_bytes(data, name, mime_type))
        return self

    def add_header(self, name: str, value: str) -> "Message":
        if self.headers is None:
            self.headers = {}
        self.headers[name] = value
        return self

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation: snake_case keys, unset and empty fields omitted."""
        # Only top-level fields are dropped; nested values such as a null
        # merge var content go out as-is.
        payload = self.model_dump(mode="json", by_alias=True, exclude={"to"})
        payload = {k: v for k, v in payload.items() if v is not None and v not in ({}, [], "")}
        payload["to"] = [r.model_dump(mode="json", exclude_none=True) for r in self.to]
        return payload


def new_message_to(email: str, name: Optional[str] = None) -> Message:
    return Message.with_recipient(email, name)
