# run.py

import os
from payroll_app import create_app


app = create_app(os.environ.get('FLASK_ENV', 'default'))


@app.shell_context_processor
def make_shell_context():
    """Adds the loaded payroll data and engine to the Flask shell."""
    store = app.extensions['payroll_store']
    return dict(store=store, calendar=store.calendar, service=app.extensions['payroll_service'])


if __name__ == '__main__':
    app.run()
