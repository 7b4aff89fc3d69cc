"""Tests de la sérialisation Size <-> entier."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from reprsize import InvalidSize, Size
from reprsize.formatter import MAX_BYTES
from reprsize.serde import SizeEncoder, deserialize, dumps, loads, serialize


class TestSerialize:
    def test_raw_integer(self):
        assert serialize(Size(54222)) == 54222
        assert isinstance(serialize(Size(54222)), int)

    def test_not_formatted_string(self):
        assert dumps(Size(54222)) == "54222"

    @pytest.mark.parametrize("count", [0, 1, 1000, 54222, MAX_BYTES])
    def test_round_trip(self, count):
        assert deserialize(serialize(Size(count))) == Size(count)
        assert loads(dumps(Size(count))) == Size(count)


class TestDeserialize:
    @pytest.mark.parametrize("value", [-1, 2**64, 1.5, "54222", None])
    def test_invalid(self, value):
        with pytest.raises(InvalidSize):
            deserialize(value)

    @pytest.mark.parametrize("text", ["-1", "1.5", "true", '"54222"'])
    def test_invalid_json(self, text):
        with pytest.raises(InvalidSize):
            loads(text)


class TestSizeEncoder:
    def test_nested(self):
        doc = {"name": "archive.tar", "size": Size(54222)}
        text = json.dumps(doc, cls=SizeEncoder)
        assert json.loads(text) == {"name": "archive.tar", "size": 54222}

    def test_other_types_still_fail(self):
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=SizeEncoder)


def test_import_reprsize_does_not_load_optional_modules():
    """`import reprsize` ne charge ni serde, ni le reporter, ni la CLI."""
    optional = [
        "reprsize.serde", "reprsize.reporter", "reprsize.cli",
        "json", "rich", "click",
    ]
    code = (
        "import sys, reprsize\n"
        f"print(','.join(m for m in {optional!r} if m in sys.modules))\n"
    )
    src = str(Path(__file__).resolve().parents[1] / "src")
    pythonpath = os.pathsep.join(
        p for p in (src, os.environ.get("PYTHONPATH")) if p
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True, text=True, check=True,
        env={**os.environ, "PYTHONPATH": pythonpath},
    )
    assert result.stdout.strip() == ""
