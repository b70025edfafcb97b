# tests/test_delimiters.py
import pytest

@pytest.mark.parametrize("ch", [" ", '"', "_", "|", "-"])
def test_is_delimiter_members(logic, ch):
    assert logic.is_delimiter(ch)
    assert logic.is_delimiter(ord(ch))

@pytest.mark.parametrize("ch", ["0", "a", "F", ",", "\t", "\n", ":", "'", "x"])
def test_is_delimiter_non_members(logic, ch):
    assert not logic.is_delimiter(ch)

def test_is_delimiter_total_over_all_bytes(logic):
    expected = {ord(c) for c in ' "_|-'}
    hits = {b for b in range(256) if logic.is_delimiter(b)}
    assert hits == expected
    # deterministic
    assert [logic.is_delimiter(b) for b in range(256)] == [logic.is_delimiter(b) for b in range(256)]

def test_is_delimiter_rejects_multichar(logic):
    with pytest.raises(TypeError):
        logic.is_delimiter("--")
