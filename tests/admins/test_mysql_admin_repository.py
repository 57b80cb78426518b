from __future__ import annotations

import mysql.connector
import pytest

from src.office_records.office_records.admins.mysql_admin_repository import MySQLAdminRepository
from src.office_records.office_records.admins.service import AdminService
from src.office_records.office_records.core.enums import AdminRole
from src.office_records.office_records.core.exceptions import ValidationError
from tests.fakes import FakeAdmins, RecordingMailer


class ReferencedRowCursor:
    def __init__(self, conn):
        self._conn = conn

    def execute(self, sql, params=None):
        self._conn.statements.append(sql)
        raise mysql.connector.IntegrityError(
            msg="Cannot delete or update a parent row: a foreign key constraint fails", errno=1451
        )

    def close(self):
        pass


class StubConnection:
    def __init__(self):
        self.statements = []
        self.rolled_back = False
        self.committed = False
        self.closed = False

    def cursor(self, dictionary=True):
        return ReferencedRowCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class StubConnectionFactory:
    def __init__(self):
        self.conn = StubConnection()

    def connect(self):
        return self.conn


def test_delete_of_referenced_admin_is_a_validation_error():
    factory = StubConnectionFactory()
    repo = MySQLAdminRepository(factory)

    with pytest.raises(ValidationError, match="Admin still owns records"):
        repo.delete_by_email("rita@example.com")

    assert factory.conn.rolled_back
    assert not factory.conn.committed
    assert factory.conn.closed


class OwningAdmins(FakeAdmins):
    def delete_by_email(self, email):
        raise ValidationError("Admin still owns records")


def test_service_does_not_notify_when_delete_is_refused():
    admins = OwningAdmins()
    admins.add(name="Rita", email="rita@example.com", username="rita", password="secret1", role=AdminRole.REGISTRY)
    mailer = RecordingMailer()
    service = AdminService(admins, mailer)

    with pytest.raises(ValidationError, match="Admin still owns records"):
        service.delete_admin(current_role=AdminRole.SUPER_ADMIN, email="rita@example.com")
    assert admins.get_by_email("rita@example.com") is not None
    assert mailer.sent == []
