# tests/test_task_models.py

from __future__ import annotations

import json

import pytest

from todo_keeper.tasks.task_models import Task, TaskFormatError, decode_tasks, encode_tasks


def test_encode_is_compact_array_in_order() -> None:
    payload = encode_tasks([Task(id=2, text="b"), Task(id=1, text="a", completed=True)])
    assert payload == '[{"id":2,"text":"b","completed":false},{"id":1,"text":"a","completed":true}]'


def test_encode_keeps_non_ascii_text() -> None:
    payload = encode_tasks([Task(id=1, text="купить чай")])
    assert "купить чай" in payload
    assert decode_tasks(payload)[0].text == "купить чай"


def test_decode_normalizes_ids_and_defaults_completed() -> None:
    tasks = decode_tasks(json.dumps([{"id": " 42 ", "text": "x"}, {"id": 7, "text": "y", "completed": True}]))
    assert tasks == [Task(id=42, text="x", completed=False), Task(id=7, text="y", completed=True)]


def test_decode_empty_array() -> None:
    assert decode_tasks("[]") == []


@pytest.mark.parametrize(
    "payload",
    [
        "",
        "not json",
        "{}",
        '"todos"',
        "[1]",
        '[{"text": "no id"}]',
        '[{"id": true, "text": "bool id"}]',
        '[{"id": "abc", "text": "bad id"}]',
        '[{"id": 1.5, "text": "float id"}]',
        '[{"id": "--5", "text": "double minus"}]',
        '[{"id": "\u00b2", "text": "superscript"}]',
        '[{"id": "1\u00b2", "text": "trailing superscript"}]',
        '[{"id": "", "text": "blank id"}]',
        '[{"id": 1}]',
        '[{"id": 1, "text": "   "}]',
        '[{"id": 1, "text": 5}]',
        '[{"id": 1, "text": "x", "completed": "no"}]',
        '[{"id": 1, "text": "x"}, {"id": "1", "text": "dup"}]',
    ],
)
def test_decode_rejects_malformed_payloads(payload: str) -> None:
    with pytest.raises(TaskFormatError):
        decode_tasks(payload)


def test_one_bad_record_invalidates_whole_payload() -> None:
    payload = json.dumps([{"id": 1, "text": "good"}, {"id": 2, "text": ""}])
    with pytest.raises(TaskFormatError):
        decode_tasks(payload)


def test_task_format_error_is_value_error() -> None:
    assert issubclass(TaskFormatError, ValueError)


def test_decode_rejects_deeply_nested_payload() -> None:
    payload = "[" * 200_000 + "]" * 200_000
    with pytest.raises(TaskFormatError):
        decode_tasks(payload)


def test_decode_accepts_negative_numeric_string_id() -> None:
    assert decode_tasks('[{"id": "-3", "text": "x"}]') == [Task(id=-3, text="x")]
