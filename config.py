import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get(
    "PROJECTHUB_CONFIG", os.path.join(ROOT_PATH, "env.yaml")
)

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./projecthub.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ACCESS_TOKEN_MINUTES = int(data.get("ACCESS_TOKEN_MINUTES", 15))
    REFRESH_TOKEN_DAYS = int(data.get("REFRESH_TOKEN_DAYS", 30))
    INVITATION_TTL_DAYS = int(data.get("INVITATION_TTL_DAYS", 7))
    KEEP_FORMER_OWNER_AS_MEMBER = bool(data.get("KEEP_FORMER_OWNER_AS_MEMBER", True))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    APP_BASE_URL = data.get("APP_BASE_URL", "http://localhost:5173")
    EMAIL_BACKEND = data.get("EMAIL_BACKEND", "log")
    EMAILJS_API_URL = data.get(
        "EMAILJS_API_URL", "https://api.emailjs.com/api/v1.0/email/send"
    )
    EMAILJS_SERVICE_ID = data.get("EMAILJS_SERVICE_ID", "")
    EMAILJS_INVITATION_TEMPLATE_ID = data.get("EMAILJS_INVITATION_TEMPLATE_ID", "")
    EMAILJS_CONTACT_TEMPLATE_ID = data.get("EMAILJS_CONTACT_TEMPLATE_ID", "")
    EMAILJS_PUBLIC_KEY = data.get("EMAILJS_PUBLIC_KEY", "")
    EMAILJS_PRIVATE_KEY = data.get("EMAILJS_PRIVATE_KEY", None)
