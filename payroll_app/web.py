# payroll_app/web.py

from flask import current_app, jsonify, request


def get_service():
    """The PayrollService bound to the current application."""
    return current_app.extensions['payroll_service']


def get_store():
    return current_app.extensions['payroll_store']


def bind_form(form_class):
    """Bind a form to the query string on GET, to the form/JSON body otherwise."""
    if request.method == 'GET':
        return form_class(formdata=request.args)
    return form_class()


def form_errors(form):
    return jsonify({'error': 'validation_error', 'fields': form.errors}), 400
