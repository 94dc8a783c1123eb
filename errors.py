# errors.py


class AppError(Exception):
    status_code = 500
    message = "Something went wrong. Please try again later."

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


# Input errors: re-render the form with messages
class ValidationError(AppError):
    status_code = 200

    def __init__(self, errors=None, message=None):
        super().__init__(message)
        self.errors = list(errors) if errors else [self.message]


class PasswordMismatch(ValidationError):
    message = "Passwords do not match"


class EmailTaken(ValidationError):
    message = "Email already registered"


class BookingInvalid(ValidationError):
    message = "Please correct the highlighted fields."

    def __init__(self, errors=None, fields=None):
        super().__init__(errors)
        self.fields = fields or {}


# Bad credentials: re-render the login form
class AuthError(AppError):
    status_code = 200
    message = "Invalid credentials."


class UnknownEmail(AuthError):
    message = "Email not registered"


class BadPassword(AuthError):
    message = "Incorrect password"


class AuthzError(AppError):
    status_code = 403
    message = "You must be logged in to view this page."


class NotFoundError(AppError):
    status_code = 404
    message = "Not found."


class LabNotFound(NotFoundError):
    message = "Lab not found"


class StorageError(AppError):
    status_code = 500


class NotificationError(AppError):
    message = "Could not send notification email."
