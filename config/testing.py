import os
import tempfile

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "claims_test_db"),
}

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", tempfile.gettempdir())
MAX_UPLOAD_MB = 1
ALLOWED_DOCUMENT_EXTENSIONS = ("pdf", "docx", "xlsx")

SESSION_MINUTES = 30
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
WTF_CSRF_ENABLED = False

AUTO_INIT_DB = False
