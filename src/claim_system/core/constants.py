"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_MINUTES = 30
DEFAULT_LIST_LIMIT = 500
DEFAULT_MAX_UPLOAD_MB = 5
DEFAULT_DOCUMENT_EXTENSIONS = ("pdf", "docx", "xlsx")

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 150
MAX_NOTES_LENGTH = 500
