import logging
from typing import Optional

from .contacts import (
    ContactStore,
    ContactType,
    PhoneBookConfig,
    SEPARATOR,
    create_contact,
    render_header,
    setup_logging,
)


class PhoneBookCLI:
    """Interactive menu for the phone book"""

    def __init__(self, store: ContactStore):
        self.store = store
        self.logger = logging.getLogger(__name__)

    def add_contact(self) -> None:
        print("\n1. Personal Contact\n2. Business Contact")
        kind = ContactType.BUSINESS if input("Enter type: ").strip() == "2" else ContactType.BASIC
        name = input("Enter Name: ")
        phone = input("Enter Phone: ")
        company = None
        if kind is ContactType.BUSINESS:
            company = input("Enter Company: ")

        self.store.add(create_contact(kind, name, phone, company))
        print("\nContact added successfully!")

    def display_all(self) -> None:
        listing = self.store.display_all()
        print(f"\n{SEPARATOR}")
        print(render_header())
        print(SEPARATOR)
        for row in listing.rows:
            print(row)
        print(SEPARATOR)
        print(f"Total Contacts: {listing.total}")

    def search_contact(self) -> None:
        key = input("Enter name to search: ")
        if (contact := self.store.search(key)) is not None:
            print("\nContact Found!")
            print("\n--- Contact Details ---")
            print(contact.details())
        else:
            print("Contact not found!")

    def delete_contact(self) -> None:
        key = input("Enter name to delete: ")
        if self.store.delete(key) is not None:
            print("Contact deleted successfully!")
        else:
            print("Contact not found!")

    def save_contacts(self) -> None:
        result = self.store.save_to_file()
        if result.ok:
            print("Contacts saved successfully!")
        else:
            print(str(result.error))

    def load_contacts(self) -> None:
        """Preload the store; a missing or unreadable file means starting empty"""
        result = self.store.load_from_file()
        if result.ok:
            print("Contacts loaded successfully!")
        else:
            print(f"Warning: {result.error}")

    def run(self) -> None:
        """Run the menu loop until the user exits"""
        actions = {
            "1": self.add_contact,
            "2": self.display_all,
            "3": self.search_contact,
            "4": self.delete_contact,
            "5": self.save_contacts,
        }
        try:
            while True:
                print("\n------------ MAIN MENU ------------")
                print("1. Add Contact")
                print("2. Display All Contacts")
                print("3. Search Contact")
                print("4. Delete Contact")
                print("5. Save to File")
                print("6. Exit")
                print("-----------------------------------")

                choice = input("Enter your choice: ").strip()

                if choice == "6":
                    print("\nExiting program... Goodbye!")
                    return
                if choice not in actions:
                    print("Invalid choice! Please try again.")
                    continue

                try:
                    actions[choice]()
                except Exception as e:
                    self.logger.error(f"Menu action {choice} failed: {str(e)}")
                    print("Unknown error occurred.")

        except (KeyboardInterrupt, EOFError):
            print("\nOperation cancelled by user.")


def main(config: Optional[PhoneBookConfig] = None) -> None:
    """Main application entry point"""
    config = config or PhoneBookConfig()
    setup_logging(config)
    logger = logging.getLogger(__name__)
    logger.info("Starting phone book")

    print("\n==============================================")
    print("     PHONE BOOK MANAGEMENT SYSTEM")
    print("==============================================")

    cli = PhoneBookCLI(ContactStore(config))
    cli.load_contacts()
    cli.run()
    logger.info("Phone book closed")


if __name__ == "__main__":
    main()
