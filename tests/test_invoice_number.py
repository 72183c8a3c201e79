import json
import re
from datetime import date

import pytest

from invoice_studio.core.errors import ArchiveError
from invoice_studio.utils.invoice_number import CounterSequence, FileSequence, generate_invoice_id


def test_invoice_id_format():
    invoice_id = generate_invoice_id(CounterSequence(), date(2024, 3, 9))

    assert invoice_id == "INV-20240309-0001"
    assert re.fullmatch(r"INV-\d{8}-\d{4}", invoice_id)


def test_counter_sequence_is_deterministic():
    sequence = CounterSequence(start=41)
    ids = [generate_invoice_id(sequence, date(2024, 1, 1)) for _ in range(2)]

    assert ids == ["INV-20240101-0042", "INV-20240101-0043"]


def test_file_sequence_survives_restart(tmp_path):
    path = tmp_path / "counter.json"
    first = FileSequence(path)
    assert first.next() == 1
    assert first.next() == 2

    second = FileSequence(path)
    assert second.current() == 2
    assert second.next() == 3
    assert json.loads(path.read_text(encoding="utf-8")) == {"counter": 3}


def test_corrupt_counter_without_floor_raises(tmp_path):
    path = tmp_path / "counter.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ArchiveError):
        FileSequence(path).next()


def test_corrupt_counter_resumes_after_floor(tmp_path, caplog):
    path = tmp_path / "counter.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level("WARNING"):
        assert FileSequence(path, floor=lambda: 7).next() == 8
    assert "unreadable" in caplog.text
    assert json.loads(path.read_text(encoding="utf-8")) == {"counter": 8}


def test_floor_wins_over_stale_counter(tmp_path):
    path = tmp_path / "counter.json"
    path.write_text(json.dumps({"counter": 2}), encoding="utf-8")

    assert FileSequence(path, floor=lambda: 5).next() == 6
    assert FileSequence(path, floor=lambda: 0).next() == 7
