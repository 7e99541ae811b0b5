"""Console phone book: contacts kept in memory and saved to a flat text file."""

from .contacts import (
    Contact,
    ContactStore,
    ContactType,
    FileAccessError,
    FileResult,
    Listing,
    PhoneBookConfig,
    PhoneBookError,
    create_contact,
    render_header,
)

__all__ = [
    "Contact",
    "ContactStore",
    "ContactType",
    "FileAccessError",
    "FileResult",
    "Listing",
    "PhoneBookConfig",
    "PhoneBookError",
    "create_contact",
    "render_header",
]
