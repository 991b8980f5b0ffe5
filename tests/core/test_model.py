from __future__ import annotations

from pathlib import Path

import pytest

from intellifile.core.exceptions import InvalidTransitionError
from intellifile.core.model import FileStatus, InputFile, ResultSet


def test_defaults_are_derived_from_payload_and_name() -> None:
    item = InputFile(data=b"12345", name="Report.PDF")

    assert item.size == 5
    assert item.media_type == "application/pdf"
    assert item.status is FileStatus.PENDING
    assert item.progress == 0
    assert item.result is None
    assert item.stem == "Report"


def test_identifiers_are_unique() -> None:
    assert InputFile(data=b"", name="a.png").id != InputFile(data=b"", name="a.png").id


def test_from_path_reads_the_file(tmp_path: Path) -> None:
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8data")

    item = InputFile.from_path(path)

    assert item.name == "photo.jpg"
    assert item.data == b"\xff\xd8data"
    assert item.media_type == "image/jpeg"


def test_successful_lifecycle() -> None:
    item = InputFile(data=b"x", name="a.pdf")
    result = ResultSet([b"out"], "application/pdf")

    item.start()
    item.update_progress(40)
    item.update_progress(20)
    assert item.progress == 40

    item.complete(result)
    assert item.status is FileStatus.COMPLETED
    assert item.progress == 100
    assert item.result is result


def test_failed_lifecycle_records_message() -> None:
    item = InputFile(data=b"x", name="a.pdf")
    item.start()
    item.fail("Failed to process a.pdf")

    assert item.status is FileStatus.ERROR
    assert item.error == "Failed to process a.pdf"


def test_illegal_transitions_are_rejected() -> None:
    item = InputFile(data=b"x", name="a.pdf")
    with pytest.raises(InvalidTransitionError):
        item.complete(ResultSet([], "application/pdf"))
    with pytest.raises(InvalidTransitionError):
        item.update_progress(50)

    assert item.can_start
    item.start()
    item.fail("boom")
    with pytest.raises(InvalidTransitionError):
        item.start()
    assert not item.can_start


def test_reset_returns_to_pending() -> None:
    item = InputFile(data=b"x", name="a.pdf")
    item.start()
    item.fail("boom")
    item.reset()

    assert item.status is FileStatus.PENDING
    assert item.error is None
    item.start()


def test_result_set_is_ordered_and_typed() -> None:
    result = ResultSet([b"a", b"b"], "image/jpeg")

    assert list(result) == [b"a", b"b"]
    assert result[1] == b"b"
    assert len(result) == 2
    assert result.extension == "jpg"
    assert not result.is_empty


def test_empty_result_set_differs_from_no_result() -> None:
    empty = ResultSet([], "application/pdf")
    item = InputFile(data=b"x", name="a.pdf")

    assert empty.is_empty
    assert item.result is None
