import pytest

from leafpress.engines.loader import load_helper
from leafpress.errors import HelperLoadError


def test_load_helper(tmp_path):
    path = tmp_path / "wrap.py"
    path.write_text(
        "PREFIX = '<'\n\n"
        "def wrap(this, text):\n"
        "    return PREFIX + text + '>'\n"
    )

    helper = load_helper("wrap", path)

    assert helper(None, "x") == "<x>"


def test_each_load_is_fresh(tmp_path):
    path = tmp_path / "count.py"
    path.write_text("def count(this):\n    return 1\n")
    first = load_helper("count", path)

    path.write_text("def count(this):\n    return 2\n")
    second = load_helper("count", path)

    assert first(None) == 1
    assert second(None) == 2


def test_syntax_error(tmp_path):
    path = tmp_path / "bad.py"
    path.write_text("def bad(:\n")

    with pytest.raises(HelperLoadError) as exc:
        load_helper("bad", path)

    assert exc.value.name == "bad"
    assert "SyntaxError" in str(exc.value)


def test_missing_file(tmp_path):
    with pytest.raises(HelperLoadError):
        load_helper("gone", tmp_path / "gone.py")


def test_not_callable(tmp_path):
    path = tmp_path / "value.py"
    path.write_text("value = 3\n")

    with pytest.raises(HelperLoadError, match="no callable named 'value'"):
        load_helper("value", path)


def test_invalid_utf8(tmp_path):
    path = tmp_path / "latin.py"
    path.write_bytes(b"# caf\xe9\ndef latin(this):\n    return ''\n")

    with pytest.raises(HelperLoadError):
        load_helper("latin", path)
