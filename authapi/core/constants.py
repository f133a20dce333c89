"""
Konstanta yang digunakan di seluruh aplikasi Token Auth API.
"""


# Response Messages
class ResponseMessage:
    """Pesan response standar."""
    # Success messages
    REGISTER_SUCCESS = "User Registered Successfully"
    LOGIN_SUCCESS = "User Logged in Successfully"
    LOGOUT_SUCCESS = "You logged out successfully"

    # Error messages
    VALIDATION_ERROR = "Validation Error"
    INVALID_CREDENTIALS = "Email & Password does not match"
    UNAUTHORIZED = "Unauthorized"
    SERVER_ERROR = "Server Error"


# Field-level validation messages, dalam format framework aslinya
class ValidationMessage:
    """Template pesan validasi per field."""
    REQUIRED = "The {field} field is required."
    STRING = "The {field} field must be a string."
    INTEGER = "The {field} field must be an integer."
    EMAIL = "The {field} field must be a valid email address."
    MIN_STRING = "The {field} field must be at least {min} characters."
    MAX_STRING = "The {field} field must not be greater than {max} characters."
    UNIQUE = "The {field} has already been taken."
    INVALID = "The {field} field is invalid."


TOKEN_TYPE = "bearer"
TOKEN_ID_SEPARATOR = "|"

# Batas atas kolom Integer (int32) untuk token id
MAX_TOKEN_ID = 2 ** 31 - 1

# Panjang kolom String(255) di tabel users
STRING_MAX_LENGTH = 255
