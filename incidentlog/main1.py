"""Menu for adding and viewing incidents."""

from __future__ import annotations

from .colors import Color, paint
from .console import Console, _parse_int
from .manager import IncidentManager


def main(argv: list[str] | None = None) -> int:
    """Run the add/view menu until the user chooses to exit."""
    manager = IncidentManager("incidents.txt")
    manager.load()
    console = Console(manager)

    try:
        while True:
            console.clear_screen()
            console._write(
                f"=== {paint('Incident Reporting - Main 1', Color.GREEN)} ===\n"
                "1. Add Incident\n"
                "2. View Incidents\n"
                "3. Exit\n"
                "Choose an option: "
            )
            choice = _parse_int(console._read_line())
            if choice is None:
                console._write(paint("Invalid input. Press Enter to try again.", Color.RED))
                console._pause()
                continue

            if choice == 1:
                console.add_incident()
            elif choice == 2:
                console.view_incidents()
            elif choice == 3:
                console.clear_screen()
                console._write(paint("Exiting Main 1... Goodbye!", Color.GREEN) + "\n")
                return 0
            else:
                console._write(paint("Invalid choice. Press Enter to try again.", Color.RED))
                console._pause()
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())