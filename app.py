"""WSGI entry point: ``flask --app app run`` or ``python app.py``."""

from src.gasc_attendance.gasc_attendance.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run()
