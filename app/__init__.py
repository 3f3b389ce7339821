from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import logging

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()

def create_app():
    # Validate required environment variables
    required_vars = ['DATABASE_URL', 'SECRET_KEY']
    for var in required_vars:
        if not os.getenv(var):
            raise ValueError(f"Required environment variable {var} is not set")
    
    app = Flask(__name__)
    app.config.from_object('config')
    app.jinja_env.trim_blocks = app.config['JINJA2_TRIM_BLOCKS']
    app.jinja_env.lstrip_blocks = app.config['JINJA2_LSTRIP_BLOCKS']
    
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    
    # Register blueprints
    from app.routes.main import main_bp
    from app.projects.calculator.routes import calculator_bp
    from app.projects.calculator.commands import calculator_cli
    
    app.register_blueprint(main_bp)
    app.register_blueprint(calculator_bp, url_prefix=app.config['CALCULATOR_URL_PREFIX'])
    app.cli.add_command(calculator_cli)
    
    # Import models to ensure they're known to Flask-SQLAlchemy
    from app.models import LogEntry
    
    return app
