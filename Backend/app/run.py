# Backend/app/run.py
from . import create_app, db


def main():
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(host="0.0.0.0", port=5000, debug=app.config.get('DEBUG', False))


if __name__ == '__main__':
    main()
