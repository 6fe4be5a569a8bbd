"""Interactive terminal front end for an incident list."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import Callable, TextIO

from .colors import Color, paint
from .incident import Incident, validate_date
from .manager import Field, IncidentManager

_INT_PREFIX = re.compile(r"\s*[+-]?[0-9]+", re.ASCII)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(text: str) -> int | None:
    """Read a leading integer the way a menu prompt expects; None if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def clear() -> None:
    """Clear the terminal screen."""
    command = "cls" if os.name == "nt" else "clear"
    subprocess.run(command, shell=True, check=False)


def format_row(number: int, incident: Incident) -> str:
    """Return one coloured table row for ``incident`` without a trailing newline."""
    return (
        f"{number:<4}"
        f"{Color.BLUE.value}{incident.area:<20}{Color.RESET.value}"
        f"{Color.YELLOW.value}{incident.type:<20}{Color.RESET.value}"
        f"{Color.GREEN.value}{incident.date:<12}{Color.RESET.value}"
    )


class Console:
    """Menus and prompts that drive an :class:`IncidentManager`."""

    def __init__(
        self,
        manager: IncidentManager,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: Callable[[], None] = clear,
    ) -> None:
        self.manager = manager
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear_screen = clear_screen

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line[:-1] if line.endswith("\n") else line

    def _pause(self) -> None:
        self.stdin.readline()

    def _ask_index(self, prompt: str) -> int | None:
        """Show the list and ask for a 1-based number; None means nothing to do."""
        self.view_incidents(pause=False)
        self._write(prompt)
        index = _parse_int(self._read_line())
        if index is None:
            self._write(paint("Invalid input!", Color.RED) + "\n")
            self._pause()
            return None
        if index == 0:
            return None
        if not 1 <= index <= len(self.manager):
            self._write(paint("Invalid incident number.", Color.RED) + "\n")
            self._pause()
            return None
        return index

    def ask_text(self, prompt: str, max_len: int = 50) -> str:
        """Prompt until a non-empty answer of at most ``max_len`` characters is given."""
        while True:
            self._write(prompt)
            answer = self._read_line()
            if not answer:
                self._write("\u274C Input cannot be empty!\n")
            elif len(answer) > max_len:
                self._write(f"\u274C Input too long! Max length: {max_len}\n")
            else:
                return answer

    def ask_date(self, prompt: str) -> str:
        """Prompt until a valid dd.mm.yyyy date is given."""
        while True:
            self._write(prompt)
            answer = self._read_line()
            if validate_date(answer):
                return answer
            self._write("\u274C Invalid date format or logical date! Use dd.mm.yyyy.\n")

    def add_incident(self) -> None:
        """Ask for a new incident's fields and store it."""
        area = self.ask_text("Enter area: ")
        kind = self.ask_text("Enter type: ")
        date = self.ask_date("Enter date (dd.mm.yyyy): ")
        self.manager.add(Incident(area, kind, date))
        self._write(paint("Incident added successfully!", Color.GREEN) + "\n")
        self._pause()

    def view_incidents(self, pause: bool = True) -> None:
        """Print all incidents as a table, optionally waiting for Enter."""
        self.clear_screen()
        if len(self.manager) == 0:
            self._write(paint("No incidents reported yet.", Color.YELLOW) + "\n")
        else:
            self._write("=== Incident Reports ===\n\n")
            self._write(f"{'#':<4}{'Area':<20}{'Incident Type':<20}{'Date':<12}\n")
            self._write("-" * 60 + "\n")
            for number, incident in enumerate(self.manager, start=1):
                self._write(format_row(number, incident) + "\n")
        if pause:
            self._write("\nPress Enter to return...")
            self._pause()

    def filter_incidents(self) -> None:
        """Ask for a field and keyword, then show the matching incidents."""
        self.clear_screen()
        self._write(
            "=== Filter Incident Reports ===\n"
            "1. Filter by Area\n"
            "2. Filter by Incident Type\n"
            "3. Filter by Date\n"
            "4. Back to Menu\n"
            "Choose an option: "
        )
        choice = self._read_line()
        if choice == "4":
            return

        option = _parse_int(choice)
        if option is None or not 1 <= option <= 3:
            self._write(paint("Invalid input. Try again.", Color.RED) + "\n")
            self._pause()
            return

        keyword = self.ask_text("Enter search keyword: ")
        matches = self.manager.filter(Field(option), keyword)

        self.clear_screen()
        self._write("=== Filtered Results ===\n")
        if not matches:
            self._write(paint("No matching incidents found.", Color.RED) + "\n")
        else:
            for number, incident in enumerate(matches, start=1):
                self._write(format_row(number, incident) + "\n")
        self._write("\nPress Enter to return...")
        self._pause()

    def edit_incident(self) -> None:
        """Pick an incident by number and change its fields one at a time."""
        if len(self.manager) == 0:
            self._write(paint("No incidents to edit.", Color.YELLOW) + "\n")
            self._pause()
            return

        index = self._ask_index("\nEnter incident number to edit (0 to return): ")
        if index is None:
            return

        while True:
            incident = self.manager[index - 1]
            self.clear_screen()
            self._write(f"=== Edit Incident #{index} ===\n")
            self._write(
                "Current Data: "
                f"{paint(incident.area, Color.BLUE)} | "
                f"{paint(incident.type, Color.YELLOW)} | "
                f"{paint(incident.date, Color.GREEN)}\n\n"
            )
            self._write(
                "1. Edit Area\n"
                "2. Edit Incident Type\n"
                "3. Edit Date\n"
                "4. Back\n"
                "Choose an option: "
            )
            choice = self._read_line()

            if choice == "1":
                self.manager.edit(index - 1, Field.AREA, self.ask_text("New area: "))
            elif choice == "2":
                self.manager.edit(index - 1, Field.TYPE, self.ask_text("New incident type: "))
            elif choice == "3":
                self.manager.edit(index - 1, Field.DATE, self.ask_date("New date (dd.mm.yyyy): "))
            elif choice == "4":
                break
            else:
                self._write(paint("Invalid option.", Color.RED) + "\n")
                self._pause()
                continue

            self._write(paint("\u2705 Field updated!", Color.GREEN) + "\n")
            self._pause()

    def delete_incident(self) -> None:
        """Pick an incident by number and delete it."""
        if len(self.manager) == 0:
            self._write(paint("No incidents to delete.", Color.YELLOW) + "\n")
            self._pause()
            return

        index = self._ask_index("\nEnter incident number to delete (0 to return): ")
        if index is None:
            return

        self.manager.remove(index - 1)
        self._write(paint("\u2705 Incident deleted successfully!", Color.GREEN) + "\n")
        self._pause()

    def sort_incidents(self) -> None:
        """Ask how to sort the incidents and sort them."""
        self._write(
            "=== Sort Incidents ===\n"
            "1. Sort by Area\n"
            "2. Sort by Date\n"
            "3. Back\n"
            "Choose an option: "
        )
        choice = _parse_int(self._read_line())
        if choice is None:
            self._write(paint("Invalid input!\n", Color.RED))
            self._pause()
            return

        if choice == 1:
            self.manager.sort_by_area()
            self._write(paint("Sorted by area.\n", Color.GREEN))
        elif choice == 2:
            self.manager.sort_by_date()
            self._write(paint("Sorted by date.\n", Color.GREEN))
        elif choice == 3:
            return
        else:
            self._write(paint("Invalid option.\n", Color.RED))
        self._pause()