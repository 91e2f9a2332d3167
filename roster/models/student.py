import uuid
from datetime import datetime

from roster import db


def _new_id():
    return uuid.uuid4().hex


class Student(db.Model):
    __tablename__ = 'students'

    # Opaque identifier, generated when the record is first flushed
    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    # tku + department code + four digit seat number, e.g. tkubm1760
    user_name = db.Column('userName', db.String(50))
    # Registration number assigned from the roster size at insert time
    sid = db.Column(db.String(10))
    name = db.Column(db.String(100))
    department = db.Column(db.String(100))
    grade = db.Column(db.String(20))
    class_name = db.Column('class', db.String(20))
    email = db.Column('Email', db.String(100))
    absences = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f'<Student {self.user_name}>'
