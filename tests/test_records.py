import pytest
from hostdash.records import Record, RecordBuilder, normalize_key


@pytest.mark.parametrize("raw, key", [
    ("Record Name . . . . . ", "RecordName"),
    ("A (Host) Record . . . ", "AHostRecord"),
    ("Time To Live  . . . . ", "TimeToLive"),
    ("Data-Length", "DataLength"),
    (" . ( ) - ", ""),
])
def test_normalize_key(raw, key):
    assert normalize_key(raw) == key


def test_designated_field_first():
    rec = Record("DeviceID", "/dev/sda1", {"SizeGB": "10.00", "FreeGB": "2.00"})
    assert list(rec.fields) == ["DeviceID", "SizeGB", "FreeGB"]
    assert rec.name == "/dev/sda1"
    assert rec.properties() == [("SizeGB", "10.00"), ("FreeGB", "2.00")]


def test_record_is_read_only():
    rec = Record("Name", "a.com", {"Type": "A"})
    with pytest.raises(TypeError):
        rec.fields["Type"] = "CNAME"


def test_builder_ignores_designated_and_empty_keys():
    b = RecordBuilder("RecordName", "a.com")
    assert b.set("RecordName", "other") is False
    assert b.set("", "junk") is False
    assert b.set("Type", "A") is True
    rec = b.build()
    assert rec.name == "a.com"
    assert rec.properties() == [("Type", "A")]


def test_built_record_is_detached_from_builder():
    b = RecordBuilder("Name", "a.com")
    b.set("Type", "A")
    rec = b.build()
    b.set("Type", "CNAME")
    assert rec["Type"] == "A"


def test_equality_respects_order():
    a = Record("Name", "x", {"A": "1", "B": "2"})
    b = Record("Name", "x", {"B": "2", "A": "1"})
    assert a != b
    assert a == Record("Name", "x", {"A": "1", "B": "2"})
