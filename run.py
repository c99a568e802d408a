import os

from flask_migrate import upgrade, init, migrate
from sqlalchemy import inspect

from quiztower import create_app, db

app = create_app()


def setup_database():
    """Initialize and run migrations if needed"""
    with app.app_context():
        tables = inspect(db.engine).get_table_names()
        app.logger.info("Found tables: %s", tables)

        if not tables:
            app.logger.info("Database empty, setting up from scratch")
            try:
                if not os.path.exists('migrations'):
                    init()
                migrate(message="Initial migration")
                upgrade()
                app.logger.info("Tables now: %s", inspect(db.engine).get_table_names())
            except Exception as e:
                app.logger.error("Setup error: %s", e)
        else:
            try:
                upgrade()
            except Exception as e:
                app.logger.error("Migration error: %s", e)


if os.environ.get('DATABASE_URL'):
    setup_database()

if __name__ == '__main__':
    app.run(debug=True)
