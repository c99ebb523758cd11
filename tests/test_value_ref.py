import mmap

import pytest

from emdb.value_ref import ValueRef


def test_owned_round_trips_bytes_unchanged():
    v = ValueRef.from_owned(bytes([1, 2, 3]))
    assert len(v) == 3
    assert bool(v) is True
    assert v.view().tobytes() == bytes([1, 2, 3])
    assert bytes(v) == bytes([1, 2, 3])
    assert v.to_bytes() == bytes([1, 2, 3])


def test_empty_owned_reports_empty():
    v = ValueRef.from_owned(b"")
    assert len(v) == 0
    assert not v


def test_equality_against_byte_slice():
    v = ValueRef.from_owned(b"hello")
    assert v == b"hello"
    assert v == bytearray(b"hello")
    assert v == memoryview(b"hello")
    assert not (v == b"hellO")


def test_equality_between_refs_and_hash():
    a = ValueRef.from_owned(b"abc")
    b = ValueRef.from_mmap(bytearray(b"xxabcxx"), 2, 5)
    assert a == b
    assert hash(a) == hash(b)
    assert {a: 1}[b] == 1


def test_equality_with_unrelated_type_is_false():
    v = ValueRef.from_owned(b"1")
    assert (v == 1) is False
    assert (v == "1") is False


def test_owned_copies_mutable_input():
    src = bytearray(b"abc")
    v = ValueRef.from_owned(src)
    src[0] = ord("z")
    assert v.to_bytes() == b"abc"


def test_from_mmap_reads_range(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"header--payload--tail")
    with open(path, "r+b") as fh:
        mapping = mmap.mmap(fh.fileno(), 0)
        v = ValueRef.from_mmap(mapping, 8, 15)
        assert len(v) == 7
        assert v == b"payload"
        assert v.to_bytes() == b"payload"
        assert v.view().readonly is True
        del v
        mapping.close()


def test_mapped_ref_pins_mapping(tmp_path):
    path = tmp_path / "pin.bin"
    path.write_bytes(b"0123456789")
    with open(path, "r+b") as fh:
        mapping = mmap.mmap(fh.fileno(), 0)
        v = ValueRef.from_mmap(mapping, 2, 6)
        with pytest.raises(BufferError):
            mapping.close()
        assert v == b"2345"
        del v
        mapping.close()
        assert mapping.closed


def test_from_mmap_empty_range():
    v = ValueRef.from_mmap(b"abc", 1, 1)
    assert len(v) == 0
    assert v == b""


@pytest.mark.parametrize("start,end", [(0, 4), (-1, 2), (3, 2)])
def test_from_mmap_rejects_bad_range(start, end):
    with pytest.raises(ValueError):
        ValueRef.from_mmap(b"abc", start, end)


def test_repr_shows_kind_and_contents():
    assert repr(ValueRef.from_owned(b"hi")) == "ValueRef(owned, b'hi')"
    assert repr(ValueRef.from_mmap(b"xhi", 1, 3)) == "ValueRef(mmap, b'hi')"