import pytest

from incidentlog.incident import Incident
from incidentlog.manager import Field, IncidentManager


@pytest.fixture
def manager(tmp_path):
    return IncidentManager(tmp_path / "incidents.txt")


@pytest.fixture
def filled(manager):
    manager.add(Incident("Zeta Street", "Theft", "05.03.2021"))
    manager.add(Incident("Alpha Road", "Fire", "01.01.2020"))
    manager.add(Incident("Mid Town", "theft attempt", "10.10.2022"))
    return manager


def test_default_data_file_name():
    assert IncidentManager().data_file.name == "incidents.txt"


def test_load_missing_file_leaves_empty(manager):
    manager.load()
    assert len(manager) == 0


def test_save_format(filled):
    lines = filled.data_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Zeta Street,Theft,05.03.2021"
    assert len(lines) == 3


def test_round_trip(filled):
    other = IncidentManager(filled.data_file)
    other.load()
    assert list(other) == list(filled)


def test_load_skips_incomplete_lines_and_keeps_extra_commas(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("A,B,C,D\nonly,two\n,x,y\n\nP,Q,R\n", encoding="utf-8")
    mgr = IncidentManager(path)
    mgr.load()
    assert list(mgr) == [Incident("A", "B", "C,D"), Incident("P", "Q", "R")]


def test_getitem_and_bounds(filled):
    assert filled[1].area == "Alpha Road"
    with pytest.raises(IndexError):
        filled[3]
    with pytest.raises(IndexError):
        filled[-1]


def test_remove_persists(filled):
    removed = filled.remove(0)
    assert removed.area == "Zeta Street"
    other = IncidentManager(filled.data_file)
    other.load()
    assert [i.area for i in other] == ["Alpha Road", "Mid Town"]


def test_remove_out_of_range(filled):
    with pytest.raises(IndexError):
        filled.remove(5)
    assert len(filled) == 3


@pytest.mark.parametrize(
    "field,attr", [(Field.AREA, "area"), (Field.TYPE, "type"), (2, "type"), (Field.DATE, "date")]
)
def test_edit_field(filled, field, attr):
    filled.edit(1, field, "New")
    assert getattr(filled[1], attr) == "New"
    other = IncidentManager(filled.data_file)
    other.load()
    assert other[1] == filled[1]


def test_edit_bad_index(filled):
    with pytest.raises(IndexError):
        filled.edit(7, Field.AREA, "x")


def test_filter_case_insensitive(filled):
    result = filled.filter(Field.TYPE, "THEFT")
    assert [i.area for i in result] == ["Zeta Street", "Mid Town"]


def test_filter_by_date_and_no_match(filled):
    assert [i.area for i in filled.filter(3, "2020")] == ["Alpha Road"]
    assert filled.filter(Field.AREA, "nowhere") == []


def test_filter_invalid_field(filled):
    with pytest.raises(ValueError):
        filled.filter(4, "x")


def test_sort_by_area(filled):
    filled.sort_by_area()
    areas = [i.area for i in filled]
    assert areas == sorted(areas)
    other = IncidentManager(filled.data_file)
    other.load()
    assert [i.area for i in other] == areas


def test_sort_by_date_is_textual(filled):
    filled.sort_by_date()
    dates = [i.date for i in filled]
    assert dates == sorted(dates)
    assert dates[0] == "01.01.2020"