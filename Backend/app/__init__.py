# Backend/app/__init__.py

import os
from flask import Flask, redirect, render_template, url_for
from flask_sqlalchemy import SQLAlchemy
from Shared.config.dotenv_loader import load_environment
from Shared.config.database import get_database_uri
from Shared.config.logging_config import configure_logging

db = SQLAlchemy()


def create_app(config_overrides=None):
    load_environment()
    app = Flask(__name__, instance_relative_config=False)

    app.config.from_mapping(
        SECRET_KEY=os.getenv('SECRET_KEY', 'dev'),
        SQLALCHEMY_DATABASE_URI=get_database_uri(),
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        LOG_LEVEL=os.getenv('LOG_LEVEL', 'INFO'),
        LOG_DIR=os.getenv('LOG_DIR', 'logs'),
        LOG_TO_FILE=os.getenv('LOG_TO_FILE', 'true').lower() in ('1', 'true', 'yes'),
    )
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)
    db.init_app(app)

    # Models must be imported before create_all() sees the metadata
    from Backend.app import models  # noqa: F401
    from Backend.app.services import build_services
    services = build_services(db.session)
    app.extensions['poseidon_services'] = services

    from Backend.app.routes.auth import create_auth_bp, require_login
    app.register_blueprint(create_auth_bp(services['user']))
    app.before_request(require_login)

    from Backend.app.routes.bid_list import create_bid_list_bp
    app.register_blueprint(create_bid_list_bp(services['bid_list']))

    from Backend.app.routes.curve_points import create_curve_point_bp
    app.register_blueprint(create_curve_point_bp(services['curve_point']))

    from Backend.app.routes.ratings import create_rating_bp
    app.register_blueprint(create_rating_bp(services['rating']))

    from Backend.app.routes.trades import create_trade_bp
    app.register_blueprint(create_trade_bp(services['trade']))

    from Backend.app.routes.rule_names import create_rule_name_bp
    app.register_blueprint(create_rule_name_bp(services['rule_name']))

    from Backend.app.routes.users import create_user_bp
    app.register_blueprint(create_user_bp(services['user']))

    @app.route('/')
    def home():
        return redirect(url_for('bidList.list'))

    @app.errorhandler(403)
    def forbidden(e):
        return render_template('403.html'), 403

    @app.errorhandler(404)
    def not_found(e):
        return render_template('error.html', code=404, message="Page not found"), 404

    @app.errorhandler(500)
    def server_error(e):
        # Flask has already logged the traceback on app.logger
        db.session.rollback()
        return render_template('error.html', code=500, message="Internal server error"), 500

    app.logger.info(f"Poseidon app created (env={os.getenv('FLASK_ENV', 'development')})")
    return app
