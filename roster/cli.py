"""Operator commands.

``flask seed-students FILE`` bootstraps the roster from a JSON array of
student objects. ``insertOne`` refuses to write into an empty roster, so a
fresh database needs to be seeded this way first.
"""

import json

import click
from marshmallow import ValidationError

from roster import db
from roster.models.student import Student
from roster.repositories.student_repository import StudentRepository
from roster.schemas import seed_students_schema
from roster.services.student_service import StudentService


def _seat_number(user_name):
    return StudentService.parse_user_name(user_name or "").seat_number


def seed_students(repository, records):
    """
    Save ``records`` (raw JSON dicts) through ``repository``.

    Records whose seat number is already on the roster (or earlier in
    ``records``) are skipped. ``sid`` keeps counting from the current roster
    size. Returns ``(created, skipped)``.
    """
    data = seed_students_schema.load(records)

    existing = repository.find_all()
    taken = {_seat_number(s.user_name) for s in existing}
    next_sid = len(existing) + 1

    created = skipped = 0
    for item in data:
        seat_number = _seat_number(item["user_name"])
        if seat_number in taken:
            skipped += 1
            continue
        item["sid"] = str(next_sid)
        repository.save(Student(**item))
        taken.add(seat_number)
        next_sid += 1
        created += 1

    return created, skipped


def register_commands(app):
    @app.cli.command("seed-students")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False))
    def seed_students_command(path):
        """Load students from a JSON file into the roster."""
        with open(path, encoding="utf-8") as fh:
            records = json.load(fh)

        if not isinstance(records, list):
            raise click.ClickException("Expected a JSON array of students")

        try:
            created, skipped = seed_students(StudentRepository(db.session), records)
        except ValidationError as err:
            raise click.ClickException(f"Invalid student data: {err.messages}")

        app.logger.info(f"[seed-students] {created} created, {skipped} skipped from {path}")
        click.echo(f"Seeded {created} students ({skipped} skipped)")

    @app.cli.command("create-db")
    def create_db_command():
        """Create the roster tables without running migrations."""
        db.create_all()
        click.echo("Tables created")
