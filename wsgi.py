# wsgi.py
"""
WSGI entry point, e.g. `gunicorn wsgi:application`.
Builds the app once and closes its database when the process exits.
"""
import atexit

from app import create_app
from db.database import get_database

# WSGI callable that servers expect
application = create_app()
atexit.register(get_database(application).close)

# Optional alias so you can run "python wsgi.py" directly
app = application

if __name__ == "__main__":
    # Local development server
    app.run(host="127.0.0.1", port=3001, debug=True)
