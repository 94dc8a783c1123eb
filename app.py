# app.py
import os

from flask import Flask, render_template
from sqlalchemy.exc import SQLAlchemyError

from auth import login_manager
from config import Config
from errors import AuthzError, NotFoundError, StorageError
from models import db
from seed import seed_labs
from views import bp


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    os.makedirs(app.instance_path, exist_ok=True)

    db.init_app(app)
    login_manager.init_app(app)
    app.register_blueprint(bp)
    register_error_handlers(app)

    with app.app_context():
        db.create_all()
        if app.config["SEED_LABS"]:
            seed_labs()

    return app


def register_error_handlers(app):
    @app.errorhandler(NotFoundError)
    def not_found(exc):
        return render_template("error.html", message=exc.message), exc.status_code

    @app.errorhandler(AuthzError)
    def forbidden(exc):
        return render_template("error.html", message=exc.message), exc.status_code

    @app.errorhandler(StorageError)
    @app.errorhandler(SQLAlchemyError)
    def storage_failed(exc):
        db.session.rollback()
        app.logger.exception("Storage failure: %s", exc)
        return render_template("error.html", message=StorageError.message), 500


if __name__ == "__main__":
    create_app().run(debug=True)
