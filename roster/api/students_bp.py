from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError
from roster import db
from roster.schemas import student_schema, student_update_schema, student_delete_schema
from roster.repositories.student_repository import StudentRepository
from roster.services.student_service import StudentService, ServiceResponse


students_bp = Blueprint('students', __name__, url_prefix='/api/v1/user')


def get_student_service():
    return StudentService(
        StudentRepository(db.session),
        capacity=current_app.config.get('ROSTER_CAPACITY', 200),
    )


def _reply(response: ServiceResponse):
    return jsonify(response.to_dict()), response.code


def _bad_request(err: ValidationError):
    current_app.logger.info(f"[students_bp] Rejected payload: {err.messages}")
    return _reply(ServiceResponse(code=400, message='invalid request', body=err.messages))


@students_bp.route('/findAll', methods=['GET'])
def find_all():
    return _reply(get_student_service().find_all())


# Request body: userName, name, department, grade, class, Email
@students_bp.route('/insertOne', methods=['POST'])
def insert_one():
    try:
        info = student_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return _bad_request(err)

    return _reply(get_student_service().insert_one(info))


# The id may come in the query string (?id= or ?_id=) or in a JSON body
@students_bp.route('/deleteById', methods=['DELETE'])
def delete_by_id():
    payload = request.get_json(silent=True)
    payload = dict(payload) if isinstance(payload, dict) else {}
    student_id = (request.args.get('_id') or request.args.get('id')
                  or payload.get('_id') or payload.get('id'))
    if student_id is not None:
        payload['_id'] = student_id

    try:
        data = student_delete_schema.load(payload)
    except ValidationError as err:
        return _bad_request(err)

    return _reply(get_student_service().delete_by_id(data['id']))


# Request body: _id, name, absences
@students_bp.route('/updateNameByID', methods=['PUT'])
def update_name_by_id():
    try:
        data = student_update_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return _bad_request(err)

    return _reply(get_student_service().update_name_by_id(
        data['id'], name=data.get('name'), absences=data.get('absences')
    ))
