import os
import sys

import pytest

# Make `config` and `roster` importable when running from the repo root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from roster import create_app, db  # noqa: E402
from roster.models.student import Student  # noqa: E402


@pytest.fixture
def app(tmp_path):
    """Test application on an on-disk SQLite file shared by requests and the test session."""
    _app = create_app('testing', {
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'test_roster.db'}",
    })

    with _app.app_context():
        db.create_all()

        yield _app

        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


def add_students(count, start_seat=1, department='bm'):
    """Insert ``count`` students straight into the table and return their ids."""
    students = []
    for i in range(count):
        seat = start_seat + i
        student = Student()
        student.user_name = f'tku{department}{seat:04d}'
        student.sid = str(i + 1)
        student.name = f'Student {seat}'
        student.department = department
        student.absences = 0
        db.session.add(student)
        students.append(student)
    db.session.commit()
    return [s.id for s in students]


@pytest.fixture
def sample_roster(app):
    """Three students with seats 0001..0003, returns their ids."""
    return add_students(3)


@pytest.fixture
def make_students(app):
    return add_students
