# incidentlog

A small terminal application for keeping a log of incident reports. Each
report has three fields: an area, an incident type and a date written as
`dd.mm.yyyy`. Reports are kept in a plain comma-separated file,
`incidents.txt`, in the current directory. Each line holds one report:

```
Downtown,Theft,03.04.2024
Harbour,Vandalism,17.11.2023
```

When the file is read, a line is split at its first two commas; lines with
an empty area, type or date are skipped. A missing file is treated as an
empty log.

## Installation

```
pip install .
```

## Commands

Two interactive menus share the same data file. Neither takes command-line
arguments. Both exit when you choose Exit or when input ends.

`incidentlog-report` adds and lists reports:

1. Add Incident: asks for the area, the type and the date. Area and type
   must not be empty and may be at most 50 characters long; the prompt is
   repeated until the answer fits. The date must be a real calendar date in
   `dd.mm.yyyy` form from 1900 onwards.
2. View Incidents: shows every report in a numbered, coloured table.
3. Exit

`incidentlog-manage` works on reports that are already there:

1. Filter Incidents: case-insensitive substring search by area, type or date.
2. Edit Incident: pick a report by its number, then change its area, type or
   date, one field at a time, until you choose Back.
3. Delete Incident: remove one report by its number (0 returns to the menu).
4. Sort Incidents: sort by area or by date. Both sorts compare the stored
   text, so sorting by date orders by the `dd.mm.yyyy` string (day first),
   not by calendar order. The file is rewritten in the new order.
5. Exit

Each change is written to `incidents.txt` straight away.

## Library use

The data layer works without the console:

```python
from incidentlog.incident import Incident, validate_date
from incidentlog.manager import Field, IncidentManager

manager = IncidentManager("incidents.txt")
manager.load()
manager.add(Incident("Downtown", "Theft", "03.04.2024"))
for incident in manager.filter(Field.AREA, "down"):
    print(incident.area, incident.type, incident.date)

manager.edit(0, Field.TYPE, "Burglary")   # 0-based index, saves the file
removed = manager.remove(0)               # returns the removed Incident
manager.sort_by_area()

validate_date("29.02.2024")  # True
validate_date("29.02.2023")  # False
```

`IncidentManager` supports `len()`, iteration and 0-based indexing; an index
out of range raises `IndexError`. `add`, `remove`, `edit`, `sort_by_area` and
`sort_by_date` save the file after each call. `Field` has the members `AREA`,
`TYPE` and `DATE`; `filter` and `edit` also accept their numbers 1, 2 and 3.

`incidentlog.console.Console` drives the menus above and can be given any
text streams for input and output, and a function to clear the screen.
`incidentlog.colors.paint(text, color)` wraps text in one of the ANSI colours
of `incidentlog.colors.Color`.

## Limitations

Reports are stored as plain text lines: a comma inside an area or type is
not escaped, and no file locking is done when both commands run at once.

## Tests

```
pip install .[test]
pytest
```