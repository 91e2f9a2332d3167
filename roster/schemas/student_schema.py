from marshmallow import EXCLUDE, fields, validate
from roster import ma
from roster.models.student import Student


class StudentSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Student
        load_instance = False
        exclude = ('created_at',)
        # Client supplied _id / sid are dropped on load
        unknown = EXCLUDE

    id = fields.Str(data_key='_id', dump_only=True)
    sid = fields.Str(dump_only=True)

    user_name = fields.Str(data_key='userName', load_default=None)
    name = fields.Str(load_default=None)
    department = fields.Str(load_default=None)
    grade = fields.Str(load_default=None)
    class_name = fields.Str(data_key='class', load_default=None)
    email = fields.Str(data_key='Email', load_default=None)
    absences = fields.Int(load_default=0)


class StudentSeedSchema(StudentSchema):
    user_name = fields.Str(
        data_key='userName', required=True, validate=validate.Length(min=1))


class StudentUpdateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(data_key='_id', required=True)
    name = fields.Str(load_default=None, allow_none=True)
    absences = fields.Int(
        load_default=None, allow_none=True, validate=validate.Range(min=0))


class StudentDeleteSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(data_key='_id', required=True)


student_schema = StudentSchema()
students_schema = StudentSchema(many=True)
seed_students_schema = StudentSeedSchema(many=True)
student_update_schema = StudentUpdateSchema()
student_delete_schema = StudentDeleteSchema()
