# run.py

import os
from motorph import create_app, db
from motorph.models.hr import Employee, AttendanceRecord, LeaveRequest


app = create_app(os.environ.get('FLASK_ENV', 'default'))

@app.shell_context_processor
def make_shell_context():
    """Adds database instance and models to the Flask shell."""
    return dict(db=db, Employee=Employee, AttendanceRecord=AttendanceRecord, LeaveRequest=LeaveRequest)

if __name__ == '__main__':
    app.run()
