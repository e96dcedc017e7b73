# payroll_app/employee/routes.py

from flask import jsonify

from payroll_app.employee import bp
from payroll_app.web import get_service, get_store


@bp.route('/')
def list_employees():
    employees = get_store().all_employees()
    return jsonify([e.to_dict() for e in employees])


@bp.route('/<employee_id>')
def employee_detail(employee_id):
    # Unknown ids raise DataError -> 404 JSON
    employee = get_service().get_employee(employee_id)
    data = employee.to_dict()
    data['full_name'] = employee.full_name
    data['total_benefits'] = str(employee.total_benefits)
    return jsonify(data)
