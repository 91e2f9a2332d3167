from roster.schemas.student_schema import (
    student_schema, students_schema, seed_students_schema,
    student_update_schema, student_delete_schema
)

__all__ = [
    'student_schema', 'students_schema', 'seed_students_schema',
    'student_update_schema', 'student_delete_schema'
]
