import logging
from logging.handlers import RotatingFileHandler
from typing import List, Optional, Iterator
from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path


# Constants
DEFAULT_DB_FILE = "phonebook.txt"
LOG_FILE = "phonebook.log"
NAME_WIDTH = 20
PHONE_WIDTH = 15
COMPANY_WIDTH = 20
SEPARATOR = "-" * 45


class ContactType(Enum):
    """Supported contact variants"""
    BASIC = "basic"
    BUSINESS = "business"


class PhoneBookError(Exception):
    """Base exception for phone book errors"""
    def __init__(self, message, error_code = None):
        super().__init__(message, error_code)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return self.message


class FileAccessError(PhoneBookError):
    """Raised when the phone book file cannot be opened"""
    def __init__(self, path, operation: str, error_code = None):
        super().__init__(
            f"File could not be opened! ({operation} {path})", error_code
        )
        self.path = Path(path)
        self.operation = operation


@dataclass
class PhoneBookConfig:
    """Configuration for the phone book"""
    db_path: str = DEFAULT_DB_FILE
    log_file: str = LOG_FILE
    log_level: str = 'INFO'
    backup_count: int = 3
    max_file_size: int = 5 * 1024 * 1024  # 5MB


def setup_logging(config: Optional[PhoneBookConfig] = None) -> None:
    """Configure logging for the application"""
    config = config or PhoneBookConfig()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            RotatingFileHandler(
                config.log_file,
                maxBytes=config.max_file_size,
                backupCount=config.backup_count
            )
        ]
    )


@dataclass(eq=False)
class Contact:
    """A phone book entry; carrying a company makes it a business contact"""
    name: str
    phone: str
    company: Optional[str] = None

    @property
    def kind(self) -> ContactType:
        if self.company is None:
            return ContactType.BASIC
        return ContactType.BUSINESS

    def render(self) -> str:
        """Format the contact as one fixed-width listing row"""
        return (
            f"{self.name:<{NAME_WIDTH}}"
            f"{self.phone:<{PHONE_WIDTH}}"
            f"{self.company or '':<{COMPANY_WIDTH}}"
        )

    def details(self) -> str:
        lines = [f"Name: {self.name}", f"Phone: {self.phone}"]
        if self.kind is ContactType.BUSINESS:
            lines.append(f"Company: {self.company}")
        return "\n".join(lines)

    # Contacts are identified by name alone
    def __eq__(self, other):
        if not isinstance(other, Contact):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)


def create_contact(
    kind: ContactType,
    name: str,
    phone: str,
    company: Optional[str] = None
) -> Contact:
    """
    Build a contact of the requested variant

    Args:
        kind: Contact variant
        name: Contact name (empty strings are accepted)
        phone: Phone number
        company: Company name, only kept for business contacts; kind
            decides the variant, so a basic contact drops any company

    Returns:
        The new contact
    """
    if kind is ContactType.BUSINESS:
        return Contact(name, phone, company if company is not None else "")
    return Contact(name, phone)


def render_header() -> str:
    """Column titles aligned with Contact.render"""
    return (
        f"{'Name':<{NAME_WIDTH}}"
        f"{'Phone':<{PHONE_WIDTH}}"
        f"{'Company':<{COMPANY_WIDTH}}"
    )


@dataclass
class FileResult:
    """Outcome of a save or load"""
    ok: bool
    path: Path
    operation: str
    count: int = 0
    error: Optional[FileAccessError] = None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


@dataclass
class Listing:
    """Rendered rows plus the live contact count"""
    rows: List[str] = field(default_factory=list)
    total: int = 0


class ContactStore:
    """Ordered, in-memory collection of contacts backed by a flat text file"""

    def __init__(self, config: Optional[PhoneBookConfig] = None):
        self.config = config or PhoneBookConfig()
        self.logger = logging.getLogger(__name__)
        self._contacts: List[Contact] = []
        self.live_count = 0

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    @property
    def contacts(self) -> List[Contact]:
        return list(self._contacts)

    def add(self, contact: Contact) -> None:
        """Append a contact; duplicate names are allowed"""
        self._contacts.append(contact)
        self.live_count += 1
        self.logger.info(f"Added contact: {contact.name}")

    def find_by_name(self, key: str) -> Optional[int]:
        """
        Find the first contact whose name equals key exactly

        Args:
            key: Name to look up (case-sensitive, not trimmed)

        Returns:
            Index of the first match in insertion order, None otherwise
        """
        for i, contact in enumerate(self._contacts):
            if contact.name == key:
                return i
        return None

    def search(self, key: str) -> Optional[Contact]:
        if (index := self.find_by_name(key)) is not None:
            return self._contacts[index]
        return None

    def delete(self, key: str) -> Optional[Contact]:
        """
        Remove the first contact named key

        Returns:
            The removed contact, or None when no contact matches
        """
        if (index := self.find_by_name(key)) is None:
            return None
        removed = self._contacts.pop(index)
        self.live_count -= 1
        self.logger.info(f"Deleted contact: {key}")
        return removed

    def clear(self) -> None:
        self._contacts.clear()
        self.live_count = 0

    def display_all(self) -> Listing:
        return Listing(
            rows=[contact.render() for contact in self._contacts],
            total=self.live_count
        )

    def save_to_file(self, path = None) -> FileResult:
        """
        Overwrite the phone book file with one name,phone line per contact.
        Company names are not written.

        Args:
            path: Target file (defaults to the configured db_path)

        Returns:
            FileResult describing the outcome; in-memory contacts are
            never changed
        """
        path = Path(path if path is not None else self.config.db_path)
        try:
            with path.open('w', errors='surrogateescape') as f:
                for contact in self._contacts:
                    f.write(f"{contact.name},{contact.phone}\n")
        except (OSError, UnicodeError) as e:
            self.logger.warning(f"Failed to save contacts to {path}: {str(e)}")
            return self._failure(path, "save", e)

        self.logger.info(f"Saved {len(self._contacts)} contacts to {path}")
        return FileResult(ok=True, path=path, operation="save",
                          count=len(self._contacts))

    def load_from_file(self, path = None) -> FileResult:
        """
        Append contacts read from the phone book file

        Each line is split on its first comma into name and phone; lines
        without a comma are skipped. Every loaded contact is basic. Bytes
        that do not decode are kept as surrogates and written back unchanged
        by save_to_file. Nothing is added unless the whole file is read.

        Args:
            path: Source file (defaults to the configured db_path)

        Returns:
            FileResult with the number of contacts loaded
        """
        path = Path(path if path is not None else self.config.db_path)
        loaded: List[Contact] = []
        try:
            with path.open('r', errors='surrogateescape') as f:
                for line_no, line in enumerate(f, start=1):
                    name, sep, phone = line.rstrip("\n").partition(",")
                    if not sep:
                        self.logger.debug(f"Skipping line {line_no} in {path}: no comma")
                        continue
                    loaded.append(Contact(name, phone))
        except (OSError, UnicodeError) as e:
            self.logger.warning(f"Failed to load contacts from {path}: {str(e)}")
            return self._failure(path, "load", e)

        self._contacts.extend(loaded)
        self.live_count += len(loaded)
        self.logger.info(f"Loaded {len(loaded)} contacts from {path}")
        return FileResult(ok=True, path=path, operation="load", count=len(loaded))

    @staticmethod
    def _failure(path: Path, operation: str, cause: Exception) -> FileResult:
        error = FileAccessError(path, operation)
        error.__cause__ = cause
        return FileResult(ok=False, path=path, operation=operation, error=error)
