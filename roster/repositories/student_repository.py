"""Data access for the ``students`` table."""

from dataclasses import dataclass
from typing import List, Optional

from roster.models.student import Student


@dataclass
class DeleteResult:
    """Outcome of a delete: whether the database acknowledged it and how many rows went."""

    acknowledged: bool
    deleted_count: int

    def to_dict(self):
        return {"acknowledged": self.acknowledged, "deletedCount": self.deleted_count}


class StudentRepository:
    """
    Thin wrapper over a SQLAlchemy session scoped to the Student model.

    The session is injected so the service layer never reaches for
    ``db.session`` itself; tests can hand in any session-like object.
    """

    def __init__(self, session):
        self.session = session

    def find_all(self) -> List[Student]:
        return (
            self.session.query(Student)
            .order_by(Student.created_at)
            .all()
        )

    def find_by_id(self, student_id) -> Optional[Student]:
        if student_id is None:
            return None
        return self.session.get(Student, str(student_id))

    def save(self, student: Student) -> Student:
        """Insert or update ``student`` and commit. Rolls back and re-raises on failure."""
        try:
            self.session.add(student)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return student

    def delete_by_id(self, student_id) -> DeleteResult:
        """
        Delete the student with ``student_id``.

        Unknown ids are not an error: the result simply reports zero deleted rows.
        """
        try:
            deleted = (
                self.session.query(Student)
                .filter(Student.id == str(student_id))
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return DeleteResult(acknowledged=True, deleted_count=deleted)
