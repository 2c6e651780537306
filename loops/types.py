"""TypedDict models for the Loops API.

Lightweight, Pydantic-free types for editor autocomplete and static checks.
At runtime these are plain dicts and lists, so keys not listed here (custom
contact properties, for instance) pass through untouched.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TypedDict
from typing_extensions import Required, Literal

# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------

OptInStatus = Literal["accepted", "pending", "rejected"]


class Contact(TypedDict, total=False):
    id: str
    email: str
    firstName: Optional[str]
    lastName: Optional[str]
    source: str
    subscribed: bool
    userGroup: str
    userId: Optional[str]
    mailingLists: Dict[str, bool]
    optInStatus: Optional[OptInStatus]


class ContactCreate(TypedDict, total=False):
    email: Required[str]
    firstName: str
    lastName: str
    subscribed: bool
    userGroup: str
    userId: str
    mailingLists: Dict[str, bool]


class ContactUpdate(TypedDict, total=False):
    email: str
    firstName: str
    lastName: str
    subscribed: bool
    userGroup: str
    userId: str
    mailingLists: Dict[str, bool]


class ContactSuccessResponse(TypedDict, total=False):
    success: bool
    id: str
    message: Optional[str]


class ContactDeleteResponse(TypedDict):
    success: bool
    message: str


# ---------------------------------------------------------------------------
# Contact properties
# ---------------------------------------------------------------------------

ContactPropertyType = Literal["string", "number", "boolean", "date"]

ContactPropertyListType = Literal["all", "custom"]


class ContactProperty(TypedDict):
    key: str
    label: str
    type: ContactPropertyType


class ContactPropertyCreate(TypedDict):
    name: str
    type: ContactPropertyType


class ContactPropertyResponse(TypedDict):
    success: bool


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

class EventSend(TypedDict, total=False):
    eventName: Required[str]
    email: str
    userId: str
    eventProperties: Dict[str, Any]
    mailingLists: Dict[str, bool]


class EventResponse(TypedDict):
    success: bool


# ---------------------------------------------------------------------------
# Transactional email
# ---------------------------------------------------------------------------

class Attachment(TypedDict):
    filename: str
    contentType: str
    data: str


class TransactionalSend(TypedDict, total=False):
    transactionalId: Required[str]
    email: Required[str]
    addToAudience: bool
    dataVariables: Dict[str, Any]
    attachments: List[Attachment]


class TransactionalResponse(TypedDict):
    success: bool


class TransactionalEmail(TypedDict, total=False):
    id: str
    name: str
    lastUpdated: str
    dataVariables: List[str]


class Pagination(TypedDict, total=False):
    totalResults: int
    returnedResults: int
    perPage: int
    totalPages: int
    nextCursor: Optional[str]
    nextPage: Optional[str]


class TransactionalListResponse(TypedDict):
    pagination: Pagination
    data: List[TransactionalEmail]


# ---------------------------------------------------------------------------
# Mailing lists
# ---------------------------------------------------------------------------

class MailingList(TypedDict):
    id: str
    name: str
    description: Optional[str]
    isPublic: bool


# ---------------------------------------------------------------------------
# API key
# ---------------------------------------------------------------------------

class ApiKeyTestResponse(TypedDict):
    success: bool
    teamName: str

