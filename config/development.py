import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "claims_db"),
}

# Supporting documents land in <UPLOAD_FOLDER>/uploads
UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "instance")
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "5"))
ALLOWED_DOCUMENT_EXTENSIONS = ("pdf", "docx", "xlsx")

SESSION_MINUTES = int(os.getenv("SESSION_MINUTES", "30"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, the app applies schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

WTF_CSRF_ENABLED = True
