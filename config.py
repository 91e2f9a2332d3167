import os
from dotenv import load_dotenv
from urllib.parse import quote_plus

load_dotenv()


class Config:
    SECRET_KEY = os.environ.get(
        'SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Build the SQLALCHEMY_DATABASE_URI in a robust way:
    # - Prefer DATABASE_URL if provided (full URI)
    # - Otherwise compose from DB_USER, DB_PASSWORD, DB_HOST, DB_PORT and DB_NAME
    # URL-encode user and password to avoid issues with special characters
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url:
        SQLALCHEMY_DATABASE_URI = _database_url
    else:
        DB_USER = os.environ.get('DB_USER', 'root')
        DB_PASSWORD = os.environ.get('DB_PASSWORD', '')
        DB_HOST = os.environ.get('DB_HOST', 'localhost')
        DB_PORT = os.environ.get('DB_PORT', '')
        DB_NAME = os.environ.get('DB_NAME', 'tku_roster')

        host = f"{DB_HOST}:{DB_PORT}" if DB_PORT else DB_HOST
        user_q = quote_plus(DB_USER)
        pw_q = quote_plus(DB_PASSWORD)
        SQLALCHEMY_DATABASE_URI = f"mysql+pymysql://{user_q}:{pw_q}@{host}/{DB_NAME}"

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Maximum number of students the roster accepts through insertOne
    ROSTER_CAPACITY = int(os.environ.get('ROSTER_CAPACITY', 200))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True
    DEBUG = True
    # On-disk SQLite so the request and the test session share a connection
    SQLALCHEMY_DATABASE_URI = 'sqlite:///test_roster.db'
    ROSTER_CAPACITY = 200


class ProductionConfig(Config):
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
