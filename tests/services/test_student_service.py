"""Tests for StudentService against the SQLite test database."""

import pytest

from roster import db
from roster.models.student import Student
from roster.repositories.student_repository import StudentRepository
from roster.services.student_service import (
    StudentService,
    FORMAT_ERROR,
    SEAT_TAKEN_ERROR,
    ROSTER_FULL,
    NOT_FOUND,
    SERVER_ERROR,
    UPDATE_FAILED,
)


@pytest.fixture
def service(app):
    return StudentService(StudentRepository(db.session))


def new_student(user_name, **extra):
    info = {
        "user_name": user_name,
        "name": "New Student",
        "department": "bm",
        "grade": "1",
        "class_name": "A",
        "email": f"{user_name}@example.com",
        "absences": 0,
    }
    info.update(extra)
    return info


# --- get_all_students / find_all ---


def test_get_all_students_empty(service):
    assert service.get_all_students() == []


def test_find_all_returns_serialized_students(service, sample_roster):
    response = service.find_all()
    assert response.code == 200
    assert len(response.body) == 3
    assert {s["_id"] for s in response.body} == set(sample_roster)
    assert response.body[0]["userName"].startswith("tku")


# --- insert_one ---


def test_insert_into_empty_roster_is_server_error(service):
    response = service.insert_one(new_student("tkubm1760"))
    assert response.code == 500
    assert response.message == SERVER_ERROR
    assert Student.query.count() == 0


def test_insert_assigns_sid_from_roster_size(service, sample_roster):
    response = service.insert_one(new_student("tkubm1760"))
    assert response.code == 200
    assert response.body["sid"] == "4"
    assert response.body["userName"] == "tkubm1760"
    assert response.body["absences"] == 0
    assert Student.query.count() == 4


def test_insert_ignores_client_id(service, sample_roster):
    response = service.insert_one(new_student("tkubm1760", id=sample_roster[0]))
    assert response.code == 200
    assert response.body["_id"] not in sample_roster
    # The original record is untouched
    assert db.session.get(Student, sample_roster[0]).user_name == "tkubm0001"


def test_insert_rejects_invalid_user_name(service, sample_roster):
    response = service.insert_one(new_student("bad"))
    assert response.code == 403
    assert response.message == FORMAT_ERROR
    assert Student.query.count() == 3


def test_insert_rejects_taken_seat_number(service, sample_roster):
    # sample roster holds seats 0001..0003
    response = service.insert_one(new_student("tkucs0002"))
    assert response.code == 403
    assert response.message == SEAT_TAKEN_ERROR


@pytest.mark.parametrize("user_name", ["tkubm1760", "bad"])
def test_insert_into_full_roster(service, make_students, user_name):
    make_students(200)
    response = service.insert_one(new_student(user_name))
    assert response.code == 403
    assert response.message == ROSTER_FULL
    assert Student.query.count() == 200


def test_insert_respects_configured_capacity(app, sample_roster):
    service = StudentService(StudentRepository(db.session), capacity=3)
    response = service.insert_one(new_student("tkubm1760"))
    assert response.code == 403
    assert response.message == ROSTER_FULL


# --- update_name_by_id ---


def test_update_unknown_id_is_not_found(service, sample_roster):
    response = service.update_name_by_id("does-not-exist", name="Someone", absences=1)
    assert response.code == 404
    assert response.message == NOT_FOUND
    assert response.body is None


def test_update_name_and_absences(service, sample_roster):
    response = service.update_name_by_id(sample_roster[0], name="Renamed", absences=3)
    assert response.code == 200
    assert response.body["_id"] == sample_roster[0]
    assert response.body["name"] == "Renamed"
    assert response.body["absences"] == 3

    student = db.session.get(Student, sample_roster[0])
    assert student.name == "Renamed"
    assert student.absences == 3


def test_update_absences_zero_is_applied(service, sample_roster):
    student = db.session.get(Student, sample_roster[1])
    student.absences = 5
    db.session.commit()

    response = service.update_name_by_id(sample_roster[1], name=None, absences=0)
    assert response.code == 200
    assert response.body["absences"] == 0
    assert db.session.get(Student, sample_roster[1]).absences == 0


def test_update_empty_name_keeps_current(service, sample_roster):
    response = service.update_name_by_id(sample_roster[2], name="", absences=None)
    assert response.code == 200
    assert response.body["name"] == "Student 3"
    assert response.body["absences"] == 0


# --- delete_by_id ---


def test_delete_existing_student(service, sample_roster):
    response = service.delete_by_id(sample_roster[0])
    assert response.code == 200
    assert response.message == "success"
    assert response.body == {"acknowledged": True, "deletedCount": 1}
    assert db.session.get(Student, sample_roster[0]) is None


def test_delete_unknown_id_is_still_success(service, sample_roster):
    response = service.delete_by_id("does-not-exist")
    assert response.code == 200
    assert response.body == {"acknowledged": True, "deletedCount": 0}
    assert Student.query.count() == 3


# --- data access failures ---


class BrokenRepository:
    def find_all(self):
        raise RuntimeError("connection lost")

    def find_by_id(self, student_id):
        raise RuntimeError("connection lost")

    def save(self, student):
        raise RuntimeError("connection lost")

    def delete_by_id(self, student_id):
        raise RuntimeError("connection lost")


class SaveFailsRepository(StudentRepository):
    def save(self, student):
        raise RuntimeError("disk full")


@pytest.fixture
def broken_service(app):
    return StudentService(BrokenRepository())


def test_get_all_students_failure_returns_none(broken_service):
    assert broken_service.get_all_students() is None


def test_find_all_failure(broken_service):
    response = broken_service.find_all()
    assert response.code == 500
    assert response.message == SERVER_ERROR


def test_insert_when_fetch_fails(broken_service):
    response = broken_service.insert_one(new_student("tkubm1760"))
    assert response.code == 500
    assert response.message == SERVER_ERROR


def test_insert_when_save_fails(app, sample_roster):
    service = StudentService(SaveFailsRepository(db.session))
    response = service.insert_one(new_student("tkubm1760"))
    assert response.code == 500
    assert response.message == SERVER_ERROR


def test_update_failure(broken_service):
    response = broken_service.update_name_by_id("abc", name="x", absences=1)
    assert response.code == 500
    assert response.message == UPDATE_FAILED


def test_update_when_save_fails(app, sample_roster):
    service = StudentService(SaveFailsRepository(db.session))
    response = service.update_name_by_id(sample_roster[0], name="x", absences=1)
    assert response.code == 500
    assert response.message == UPDATE_FAILED


def test_delete_failure_reports_error_message(broken_service):
    response = broken_service.delete_by_id("abc")
    assert response.code == 500
    assert response.message == "connection lost"
