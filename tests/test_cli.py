"""Tests for the interactive phone book menu."""
import pytest

from phonebook.cli import PhoneBookCLI, main
from phonebook.contacts import Contact, ContactStore, PhoneBookConfig


def feed(monkeypatch, *answers):
    """Answer input() prompts in order"""
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


@pytest.fixture
def cli(tmp_path):
    config = PhoneBookConfig(db_path=str(tmp_path / "phonebook.txt"))
    return PhoneBookCLI(ContactStore(config))


def test_add_business_and_display(cli, monkeypatch, capsys):
    feed(monkeypatch, "1", "2", "Bob", "555-2222", "Acme", "2", "6")

    cli.run()

    out = capsys.readouterr().out
    assert "Contact added successfully!" in out
    assert Contact("Bob", "555-2222", "Acme").render() in out
    assert "Total Contacts: 1" in out
    assert "Goodbye!" in out


def test_add_unknown_type_is_personal(cli, monkeypatch):
    feed(monkeypatch, "1", "9", "Ann", "111", "6")

    cli.run()

    assert cli.store.search("Ann").company is None


def test_search_found_and_missing(cli, monkeypatch, capsys):
    cli.store.add(Contact("Ann", "111"))
    feed(monkeypatch, "3", "Ann", "3", "Zed", "6")

    cli.run()

    out = capsys.readouterr().out
    assert "Contact Found!" in out
    assert "Name: Ann\nPhone: 111" in out
    assert "Contact not found!" in out


def test_delete(cli, monkeypatch, capsys):
    cli.store.add(Contact("Ann", "111"))
    feed(monkeypatch, "4", "Ann", "4", "Ann", "6")

    cli.run()

    out = capsys.readouterr().out
    assert "Contact deleted successfully!" in out
    assert "Contact not found!" in out
    assert len(cli.store) == 0


def test_save(cli, monkeypatch, capsys, tmp_path):
    cli.store.add(Contact("Alice", "111"))
    feed(monkeypatch, "5", "6")

    cli.run()

    assert "Contacts saved successfully!" in capsys.readouterr().out
    assert (tmp_path / "phonebook.txt").read_text() == "Alice,111\n"


def test_save_failure_is_reported(tmp_path, monkeypatch, capsys):
    cli = PhoneBookCLI(ContactStore(PhoneBookConfig(db_path=str(tmp_path))))
    cli.store.add(Contact("Alice", "111"))
    feed(monkeypatch, "5", "2", "6")

    cli.run()

    out = capsys.readouterr().out
    assert "File could not be opened!" in out
    assert "Total Contacts: 1" in out


def test_invalid_choice(cli, monkeypatch, capsys):
    feed(monkeypatch, "abc", "7", "6")

    cli.run()

    assert capsys.readouterr().out.count("Invalid choice! Please try again.") == 2


def test_unexpected_error_keeps_running(cli, monkeypatch, capsys):
    def boom(key):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli.store, "search", boom)
    feed(monkeypatch, "3", "Ann", "6")

    cli.run()

    out = capsys.readouterr().out
    assert "Unknown error occurred." in out
    assert "Goodbye!" in out


def test_end_of_input_stops_loop(cli, monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)

    cli.run()

    assert "Operation cancelled by user." in capsys.readouterr().out


def test_main_starts_empty_without_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, "2", "6")

    main(PhoneBookConfig(log_file=str(tmp_path / "phonebook.log")))

    out = capsys.readouterr().out
    assert "Warning: File could not be opened!" in out
    assert "Total Contacts: 0" in out


def test_main_preloads_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "phonebook.txt").write_text("Alice,111\nBob,222\n")
    feed(monkeypatch, "2", "6")

    main(PhoneBookConfig(log_file=str(tmp_path / "phonebook.log")))

    out = capsys.readouterr().out
    assert "Contacts loaded successfully!" in out
    assert Contact("Alice", "111").render() in out
    assert "Total Contacts: 2" in out


def test_main_loads_file_with_undecodable_bytes(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "phonebook.txt").write_bytes(b"Alice,111\nJos\xe9,222\nBob,333\n")
    feed(monkeypatch, "3", "Bob", "6")

    main(PhoneBookConfig(log_file=str(tmp_path / "phonebook.log")))

    out = capsys.readouterr().out
    assert "Contacts loaded successfully!" in out
    assert "Name: Bob\nPhone: 333" in out
    assert "Goodbye!" in out
