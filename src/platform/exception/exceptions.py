class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidInputError(CustomBaseError):
    """Malformed input, rejected before any lookup"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class BusinessRuleViolationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictRetryableError(CustomBaseError):
    """Storage conflict the caller may resolve by regenerating and retrying"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class ConfirmationCodeConflictError(ConflictRetryableError):
    def __init__(self, confirmation_code: str) -> None:
        self.confirmation_code = confirmation_code
        super().__init__(f'Confirmation code already in use: {confirmation_code}')


class UnexpectedError(CustomBaseError):
    """Infrastructure failure; the message is logged but never sent to the client"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
