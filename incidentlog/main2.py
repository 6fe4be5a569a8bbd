"""Menu for filtering, editing, deleting and sorting incidents."""

from __future__ import annotations

from .colors import Color, paint
from .console import Console, _parse_int
from .manager import IncidentManager


def main(argv: list[str] | None = None) -> int:
    """Run the maintenance menu until the user chooses to exit."""
    manager = IncidentManager("incidents.txt")
    manager.load()
    console = Console(manager)

    actions = {
        1: console.filter_incidents,
        2: console.edit_incident,
        3: console.delete_incident,
        4: console.sort_incidents,
    }

    try:
        while True:
            console.clear_screen()
            console._write(
                paint("=== Incident Reporting - Main 2 ===", Color.GREEN) + "\n"
                "1. Filter Incidents\n"
                "2. Edit Incident\n"
                "3. Delete Incident\n"
                "4. Sort Incidents\n"
                "5. Exit\n"
                "Choose an option: "
            )
            choice = _parse_int(console._read_line())
            if choice is None:
                console._write(paint("Invalid input. Try again.", Color.RED) + "\n")
                console._pause()
                continue

            if choice in actions:
                actions[choice]()
            elif choice == 5:
                console.clear_screen()
                console._write(paint("Exiting Main 2... Goodbye!", Color.GREEN) + "\n")
                return 0
            else:
                console._write(paint("Invalid choice!", Color.RED) + "\n")
                console._pause()
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())