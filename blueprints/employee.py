import marshmallow
import marshmallow_dataclass
from dependency_injector.wiring import Provide
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from models import EmployeeData
from services import EmployeeService

from .util import class_route, empty_response, error_response, handles_storage_error, json_response, validation_error_response

blp = Blueprint('Employees', __name__)

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'

EmployeeSchema = marshmallow_dataclass.class_schema(EmployeeData)


@class_route(blp, '/api/employee/list')
class EmployeeList(MethodView):
    init_every_request = False

    @handles_storage_error
    def get(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        employees = employee_service.list_employees()
        return json_response(EmployeeSchema(many=True).dump(employees), 200)


@class_route(blp, '/api/employee')
class EmployeeRegistration(MethodView):
    init_every_request = False

    @handles_storage_error
    def post(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        req_json = request.get_json(silent=True)
        if not isinstance(req_json, dict):
            return error_response(JSON_VALIDATION_ERROR, 400)

        try:
            data: EmployeeData = EmployeeSchema().load(req_json)
        except marshmallow.ValidationError as err:
            return validation_error_response(err)

        employee_service.create_employee(data)

        return empty_response(201)
