from __future__ import annotations

import re
from datetime import datetime

import pytest

from src.office_records.office_records.common.uploads import Attachment
from src.office_records.office_records.core.enums import AdminRole, FileType, RecordStatus
from src.office_records.office_records.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.office_records.office_records.files.service import FileService
from src.office_records.office_records.records.service import RecordService
from tests.fakes import FakeFiles, FakeRecords

REGISTRY = AdminRole.REGISTRY


@pytest.fixture()
def records():
    return FakeRecords()


@pytest.fixture()
def files(records):
    return FakeFiles(records)


@pytest.fixture()
def file_service(files):
    return FileService(files)


@pytest.fixture()
def record_service(records, files):
    return RecordService(records, files)


def _add_file(service, **overrides):
    data = dict(current_role=REGISTRY, admin_id=1, name="Correspondence", type="Open File")
    data.update(overrides)
    return service.add_file(**data)


def test_add_file_numbers_per_admin(file_service):
    first = _add_file(file_service)
    second = _add_file(file_service)
    year = datetime.now().year

    assert first.file_number == f"F-{year}-001"
    assert first.reference_number == "REF-001"
    assert second.file_number == f"F-{year}-002"
    assert second.reference_number == "REF-002"
    assert first.type == FileType.OPEN


def test_file_number_not_reused_after_delete(file_service):
    first = _add_file(file_service)
    second = _add_file(file_service)
    file_service.delete_file(current_role=REGISTRY, file_id=first.id)

    third = _add_file(file_service)
    year = datetime.now().year
    assert third.file_number == f"F-{year}-003"
    assert third.file_number != second.file_number


def test_duplicate_reference_gets_next_suffix(file_service):
    refs = [_add_file(file_service, reference_number="REF-001").reference_number for _ in range(3)]
    assert refs == ["REF-001", "REF-001-2", "REF-001-3"]


def test_default_reference_skips_taken_value(file_service):
    _add_file(file_service, admin_id=2, reference_number="REF-001")
    entry = _add_file(file_service, admin_id=1)
    assert entry.reference_number == "REF-001-2"


def test_add_file_validates_type_and_role(file_service):
    with pytest.raises(ValidationError, match="Invalid file type"):
        _add_file(file_service, type="Top Secret")
    with pytest.raises(ValidationError, match="File name is required"):
        _add_file(file_service, name="")
    with pytest.raises(AuthorizationError):
        _add_file(file_service, current_role=AdminRole.EMPLOYEE)


def test_update_and_delete_file(file_service, record_service, records):
    entry = _add_file(file_service)
    record_service.add_record(
        current_role=REGISTRY, file_id=entry.id, type="Incoming", sender="MoF", recipient="Registry", subject="Budget"
    )

    file_service.update_file(current_role=REGISTRY, file_id=entry.id, data={"name": "Budget", "type": "Secret File"})
    updated = file_service.get_file(entry.id)
    assert updated.name == "Budget"
    assert updated.type == FileType.SECRET
    assert len(updated.records) == 1

    with pytest.raises(ValidationError, match="No fields to update"):
        file_service.update_file(current_role=REGISTRY, file_id=entry.id, data={"fileNumber": "X"})

    file_service.delete_file(current_role=REGISTRY, file_id=entry.id)
    assert records.rows == {}
    with pytest.raises(NotFoundError):
        file_service.get_file(entry.id)


def test_add_record_defaults(file_service, record_service):
    entry = _add_file(file_service)
    first = record_service.add_record(
        current_role=REGISTRY, file_id=entry.id, type="Incoming", sender="MoF", recipient="Registry", subject="Budget"
    )
    second = record_service.add_record(
        current_role=REGISTRY, file_id=entry.id, type="Outgoing", sender="Registry", recipient="MoH", subject="Reply"
    )

    assert first.unique_number == "R-001"
    assert second.unique_number == "R-002"
    assert first.status == RecordStatus.ACTIVE
    assert re.fullmatch(r"REF-\d{13}", first.reference)
    assert re.fullmatch(rf"TRK-{datetime.now().year}-[0-9A-F]{{8}}", first.tracking_number)


@pytest.mark.parametrize("missing", ["sender", "recipient", "subject"])
def test_add_record_requires_from_to_subject(file_service, record_service, missing):
    entry = _add_file(file_service)
    data = dict(sender="MoF", recipient="Registry", subject="Budget")
    data[missing] = " "
    with pytest.raises(ValidationError, match="is required"):
        record_service.add_record(current_role=REGISTRY, file_id=entry.id, type="Incoming", **data)


def test_add_record_to_missing_file(record_service):
    with pytest.raises(NotFoundError, match="File not found"):
        record_service.add_record(
            current_role=REGISTRY, file_id="nope", type="Incoming", sender="a", recipient="b", subject="c"
        )


def test_attachment_limits(file_service, record_service):
    entry = _add_file(file_service)
    base = dict(current_role=REGISTRY, file_id=entry.id, type="Incoming", sender="a", recipient="b", subject="c")

    too_big = Attachment(name="scan.pdf", size=2 * 1024 * 1024, content_type="application/pdf", url="data:")
    with pytest.raises(ValidationError, match="less than 1MB"):
        record_service.add_record(attachment=too_big, **base)

    wrong_type = Attachment(name="run.exe", size=10, content_type="application/x-msdownload", url="data:")
    with pytest.raises(ValidationError, match="Only PDF"):
        record_service.add_record(attachment=wrong_type, **base)

    ok = Attachment(name="scan.png", size=1024, content_type="image/png", url="data:image/png;base64,AA==")
    record = record_service.add_record(attachment=ok, **base)
    assert record.to_dict()["attachmentName"] == "scan.png"


def test_update_record_and_search(file_service, record_service):
    entry = _add_file(file_service)
    record = record_service.add_record(
        current_role=REGISTRY, file_id=entry.id, type="Incoming", sender="MoF", recipient="Registry", subject="Budget"
    )

    with pytest.raises(ValidationError, match="No fields to update"):
        record_service.update_record(current_role=REGISTRY, record_id=record.id, data={})

    record_service.update_record(
        current_role=REGISTRY, record_id=record.id, data={"status": "Urgent", "subject": "Budget 2025"}
    )

    hits = record_service.search_records("budget 2025")
    assert [h["id"] for h in hits] == [record.id]
    assert hits[0]["status"] == "Urgent"
    assert record_service.search_records("budget", status="Archived") == []
    assert record_service.search_records(record.tracking_number)[0]["uniqueNumber"] == "R-001"


def test_recent_activity_newest_first(file_service, record_service):
    entry = _add_file(file_service)
    for subject, day in (("old", 1), ("new", 3), ("mid", 2)):
        record_service.add_record(
            current_role=REGISTRY,
            file_id=entry.id,
            type="Incoming",
            sender="a",
            recipient="b",
            subject=subject,
            date=datetime(2025, 1, day),
        )
    assert [r["subject"] for r in record_service.recent_activity(2)] == ["new", "mid"]
