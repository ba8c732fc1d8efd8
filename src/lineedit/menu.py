"""Interactive menu loop over a document session."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import IntEnum

import click

from lineedit.config.schema import EditorConfig
from lineedit.document.errors import (
    AlreadyEmpty,
    DocumentIOError,
    EditorError,
    EmptyDocument,
    InvalidChoice,
)
from lineedit.document.session import DocumentSession

logger = logging.getLogger(__name__)


class Command(IntEnum):
    ADD = 1
    VIEW = 2
    SAVE = 3
    LOAD = 4
    CLEAR = 5
    EXIT = 6


MENU_LABELS = {
    Command.ADD: "Add text line(s)",
    Command.VIEW: "View document",
    Command.SAVE: "Save to file",
    Command.LOAD: "Load from file",
    Command.CLEAR: "Clear document",
    Command.EXIT: "Exit",
}


def parse_choice(text: str) -> Command:
    """Parse menu input into a Command. Raises InvalidChoice."""
    low, high = int(min(Command)), int(max(Command))
    try:
        return Command(int(text.strip()))
    except ValueError:
        raise InvalidChoice(text, low, high) from None


def format_listing(rows: list[tuple[int, str]], width: int = 4) -> str:
    """Format (index, text) rows with right-aligned line numbers."""
    return "\n".join(f"{index:>{width}}: {text}" for index, text in rows)


class MenuLoop:
    """Prompts for a menu choice and dispatches it until Exit or end of input."""

    def __init__(self, session: DocumentSession, config: EditorConfig | None = None) -> None:
        self.session = session
        self.config = config or EditorConfig()
        self._handlers = {
            Command.ADD: self.add_lines,
            Command.VIEW: self.view,
            Command.SAVE: self.save,
            Command.LOAD: self.load,
            Command.CLEAR: self.clear,
        }

    def run(self) -> None:
        if self.config.show_banner:
            self._clear_screen()
            click.echo("Simple Text Editor")
            click.echo("==================")

        while True:
            self.show_menu()
            try:
                text = self._prompt("Choice")
            except click.Abort:
                logger.debug("Input closed, leaving menu loop")
                break

            try:
                command = parse_choice(text)
            except InvalidChoice as e:
                click.echo(str(e))
                self._pause()
                continue

            if command is Command.EXIT:
                click.echo("\nThank you for using the text editor!")
                click.echo("Exiting...")
                break

            try:
                self.dispatch(command)
            except click.Abort:
                logger.debug("Input closed during %s, leaving menu loop", command.name)
                break
            self._pause()

    def show_menu(self) -> None:
        click.echo("\n--- MENU ---")
        for command, label in MENU_LABELS.items():
            click.echo(f"{command.value}. {label}")

    def dispatch(self, command: Command) -> None:
        """Run the handler for command, reporting any editor error."""
        handler = self._handlers[command]
        try:
            handler()
        except EditorError as e:
            logger.debug("%s failed: %s", command.name, e)
            click.echo(f"\nError: {e}")

    def add_lines(self) -> None:
        click.echo("\nEnter text (empty line to finish):")
        added = self.session.append_lines(self._read_lines())
        if added:
            click.echo("\nText added successfully!")
            click.echo(f"Total lines in document: {self.session.line_count}")
        else:
            click.echo("No text was added.")

    def view(self) -> None:
        self._clear_screen()
        click.echo("Document Viewer")
        click.echo("===============")
        try:
            rows = self.session.render()
        except EmptyDocument:
            click.echo("\nDocument is empty.")
            click.echo("Use option 1 to add text or option 4 to load a file.")
            return

        click.echo(f"Total lines: {len(rows)}")
        click.echo("\n--- DOCUMENT CONTENT ---")
        click.echo(format_listing(rows, self.config.number_width))
        click.echo("--- END OF DOCUMENT ---")

    def save(self) -> None:
        if self.session.is_empty:
            click.echo("\nNo content to save.")
            click.echo("Please add some text first using option 1.")
            return

        filename = self._prompt(f"\nEnter filename (e.g., document{self.config.default_extension})")
        try:
            result = self.session.save_to(filename)
        except DocumentIOError as e:
            click.echo(f"Error: Could not create file '{e.path}' ({e.reason})")
            click.echo("Please check the filename and try again.")
            return

        click.echo(f"\nSuccess! Document saved to '{result.path}'")
        click.echo(f"Lines saved: {result.lines}")

    def load(self) -> None:
        filename = self._prompt("\nEnter filename to load")
        try:
            count = self.session.load_from(filename)
        except DocumentIOError as e:
            click.echo(f"Error: Could not open file '{e.path}' ({e.reason})")
            click.echo("Please make sure the file exists and try again.")
            return

        click.echo(f"\nSuccess! Loaded '{filename}'")
        click.echo(f"Lines loaded: {count}")

    def clear(self) -> None:
        try:
            removed = self.session.clear()
        except AlreadyEmpty:
            click.echo("\nDocument is already empty.")
            return

        click.echo("\nDocument cleared successfully!")
        click.echo(f"Lines removed: {removed}")

    def _read_lines(self) -> Iterator[str]:
        while True:
            yield self._prompt(f"Line {self.session.line_count + 1}")

    def _prompt(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False)

    def _pause(self) -> None:
        if self.config.pause_after_action:
            click.pause("\nPress Enter to continue...")

    def _clear_screen(self) -> None:
        if self.config.clear_screen:
            click.clear()
