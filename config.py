from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///mamaalert.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Hosted PostgreSQL drops idle connections; only applied to postgres URIs
    POSTGRES_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'pool_size': 5,
        'max_overflow': 10,
        'pool_timeout': 30,
        'connect_args': {
            'sslmode': 'require',
            'connect_timeout': 10,
        }
    }

    JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "12"))
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]

    # SMS gateway (Termii)
    TERMII_API_KEY = os.getenv("TERMII_API_KEY")
    TERMII_SENDER_ID = os.getenv("TERMII_SENDER_ID", "MamaAlert")
    TERMII_BASE_URL = os.getenv("TERMII_BASE_URL", "https://api.ng.termii.com")
    SMS_TIMEOUT = float(os.getenv("SMS_TIMEOUT", "15"))

    # AI nurse
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    # Maps & location
    GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY")
    GEOLOCATION_URL = os.getenv("GEOLOCATION_URL", "https://ipapi.co/json/")
    GEOLOCATION_TIMEOUT = float(os.getenv("GEOLOCATION_TIMEOUT", "10"))

    # always | once_per_day | never
    SEVERE_SYMPTOM_ALERT_POLICY = os.getenv("SEVERE_SYMPTOM_ALERT_POLICY", "once_per_day")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    TERMII_API_KEY = "test-termii-key"
    GEMINI_API_KEY = None
    GOOGLE_MAPS_API_KEY = None
    GEOLOCATION_URL = None
