"""Student roster service: CRUD operations and the user name validator.

Every operation that backs an endpoint answers with a ``ServiceResponse``
envelope instead of raising; data access failures are logged and turned
into a 500 envelope.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional

from flask import current_app

from roster.models.student import Student
from roster.schemas import student_schema, students_schema

SCHOOL_CODE = "tku"
DEFAULT_CAPACITY = 200

# Validator outcomes, checked in this order
FORMAT_ERROR = (
    "invalid student user name, expected tku + department code + "
    "four digit seat number, e.g. tkubm1760"
)
SCHOOL_CODE_ERROR = "school code must be tku"
SEAT_FORMAT_ERROR = "invalid seat number, it must be exactly four digits"
SEAT_TAKEN_ERROR = "seat number already exists"
PASSED = "passed"

ROSTER_FULL = "student list is full"
NOT_FOUND = "not found"
SERVER_ERROR = "server error"
UPDATE_FAILED = "server error, update failed"

_seat_number_re = re.compile(r"^\d{4}$")


@dataclass
class ServiceResponse:
    code: int = 200
    message: str = ""
    body: Any = None

    def to_dict(self):
        return {"code": self.code, "message": self.message, "body": self.body}


@dataclass
class SeatInfo:
    school_name: str
    department: str
    seat_number: str


class StudentService:
    def __init__(self, repository, capacity: int = DEFAULT_CAPACITY):
        self.repository = repository
        self.capacity = capacity

    def get_all_students(self) -> Optional[List[Student]]:
        """Every student on the roster, or None when the fetch failed."""
        try:
            return self.repository.find_all()
        except Exception as e:
            current_app.logger.error(
                f"[StudentService] Error fetching students: {e}", exc_info=True
            )
            return None

    def find_all(self) -> ServiceResponse:
        students = self.get_all_students()
        if students is None:
            return ServiceResponse(code=500, message=SERVER_ERROR)
        return ServiceResponse(message="success", body=students_schema.dump(students))

    def update_name_by_id(self, student_id, name=None, absences=None) -> ServiceResponse:
        """
        Update the display name and/or absences of one student.

        ``name`` only replaces the stored value when it is non-empty;
        ``absences`` replaces it whenever it is not None, so 0 is honoured.
        """
        response = ServiceResponse()
        try:
            student = self.repository.find_by_id(student_id)
            if student is None:
                response.code = 404
                response.message = NOT_FOUND
                return response

            student.name = name or student.name
            if absences is not None:
                student.absences = absences

            student = self.repository.save(student)
            response.body = student_schema.dump(student)
            response.message = "update success"
        except Exception as e:
            current_app.logger.error(
                f"[StudentService] Error updating student {student_id}: {e}",
                exc_info=True,
            )
            response.code = 500
            response.message = UPDATE_FAILED

        return response

    def insert_one(self, info: dict) -> ServiceResponse:
        """
        Add a student to the roster.

        ``info`` holds the loaded student fields (``user_name``, ``name``...).
        The roster is fetched first to get its size and to check seat numbers.
        An empty roster is reported as a server error, same as a failed fetch.
        """
        current = self.get_all_students()
        response = ServiceResponse()

        if not current:
            response.code = 500
            response.message = SERVER_ERROR
            return response

        try:
            check = self.validate_user_name(info.get("user_name") or "")
            if len(current) >= self.capacity:
                response.code = 403
                response.message = ROSTER_FULL
            elif check != PASSED:
                response.code = 403
                response.message = check
            else:
                # Not atomic: concurrent inserts can read the same count
                data = dict(info)
                data.pop("id", None)
                data.pop("_id", None)
                data["sid"] = str(len(current) + 1)
                student = self.repository.save(Student(**data))
                response.body = student_schema.dump(student)
                response.message = "success"
        except Exception as e:
            current_app.logger.error(
                f"[StudentService] Error inserting student: {e}", exc_info=True
            )
            response.code = 500
            response.message = SERVER_ERROR
            return response

        if response.code == 403:
            current_app.logger.info(
                f"[StudentService] Insert of '{info.get('user_name')}' rejected: {response.message}"
            )
        return response

    def delete_by_id(self, student_id) -> ServiceResponse:
        response = ServiceResponse()
        try:
            result = self.repository.delete_by_id(student_id)
            response.message = "success"
            response.body = result.to_dict()
        except Exception as e:
            current_app.logger.error(
                f"[StudentService] Error deleting student {student_id}: {e}",
                exc_info=True,
            )
            response.code = 500
            response.message = str(e)
        return response

    def validate_user_name(self, user_name: str) -> str:
        if len(user_name) < 7:
            return FORMAT_ERROR

        info = self.parse_user_name(user_name)

        if info.school_name != SCHOOL_CODE:
            return SCHOOL_CODE_ERROR

        if not _seat_number_re.match(info.seat_number):
            return SEAT_FORMAT_ERROR

        if self.seat_number_exists(info.seat_number):
            return SEAT_TAKEN_ERROR

        return PASSED

    @staticmethod
    def parse_user_name(user_name: str) -> SeatInfo:
        return SeatInfo(
            school_name=user_name[:3],
            department=user_name[3:len(user_name) - 4],
            seat_number=user_name[-4:],
        )

    def seat_number_exists(self, seat_number: str) -> bool:
        students = self.get_all_students() or []
        for student in students:
            if self.parse_user_name(student.user_name or "").seat_number == seat_number:
                return True
        return False
