import os

DATABASE_URL = (os.getenv("DATABASE_URL") or "").replace("postgres://", "postgresql://", 1)
SQLALCHEMY_DATABASE_URI = DATABASE_URL

SECRET_KEY = os.getenv("SECRET_KEY")

# Calculator hosting: path prefix for static-style deployments and page metadata
CALCULATOR_URL_PREFIX = os.getenv("CALCULATOR_URL_PREFIX", "/calculator")
CALCULATOR_TITLE = os.getenv("CALCULATOR_TITLE", "Calculadora")
CALCULATOR_DESCRIPTION = os.getenv("CALCULATOR_DESCRIPTION", "Una calculadora básica")
CALCULATOR_LOCALE = os.getenv("CALCULATOR_LOCALE", "es")

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
