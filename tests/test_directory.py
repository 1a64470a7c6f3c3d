# ===============================================
# tests/test_directory.py
# Record loading and the static record source.
# ===============================================
import pytest

from src.search import Record, StaticRecordSource, default_source, load_records


def test_reference_directory():
    records = default_source().list_all_records()
    assert len(records) == 15
    assert [r.id for r in records] == list(range(1, 16))
    assert records[0] == Record(id=1, name="Isaac Newton", contact="newton@math.com")
    assert records[13].name == "Henri Poincaré"
    assert all(r.contact.endswith("@math.com") for r in records)


def test_default_source_is_built_once():
    assert default_source() is default_source()


def test_records_are_immutable():
    rec = default_source().list_all_records()[0]
    with pytest.raises(AttributeError):
        rec.name = "Someone Else"
    assert isinstance(default_source().list_all_records(), tuple)


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        StaticRecordSource([
            Record(id=1, name="A", contact="a@x.com"),
            Record(id=1, name="B", contact="b@x.com"),
        ])


def test_load_records_from_yaml(tmp_path):
    path = tmp_path / "people.yaml"
    path.write_text(
        "- {id: 10, name: Grace Hopper, contact: hopper@navy.mil}\n"
        "- {id: '11', name: Hedy Lamarr, contact: lamarr@film.com}\n",
        encoding="utf-8",
    )
    records = load_records(str(path))
    assert [r.id for r in records] == [10, 11]
    assert records[1].name == "Hedy Lamarr"


def test_load_records_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_records(str(path)) == []


def test_load_records_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records(str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize("body", [
    "{id: 1, name: A, contact: a@x.com}\n",
    "- {id: 1, name: A}\n",
    "- {id: one, name: A, contact: a@x.com}\n",
    "- just a string\n",
])
def test_load_records_malformed(tmp_path, body):
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError):
        load_records(str(path))
