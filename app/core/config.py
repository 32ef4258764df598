import os

from app.core.errors import ConfigurationError

# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./interview_trainer.db")

# ✅ Security
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ✅ CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

# ✅ OpenAI
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

# ✅ Object storage (S3)
AWS_BUCKET_REGION = os.getenv("AWS_BUCKET_REGION")
AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
AWS_BUCKET_NAME = os.getenv("AWS_BUCKET_NAME")

# ✅ Voice calls (Retell)
RETELL_API_KEY = os.getenv("RETELL_API_KEY")
RETELL_BASE_URL = os.getenv("RETELL_BASE_URL", "https://api.retellai.com")


def require_settings(*names: str) -> dict:
    """
    Return the named settings, failing fast if any of them is unset.

    Values are read from this module at call time so tests (and late env
    loading) can patch them.

    Raises:
        ConfigurationError: listing every missing setting
    """
    module_globals = globals()
    values = {name: module_globals.get(name) for name in names}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigurationError(missing)
    return values
