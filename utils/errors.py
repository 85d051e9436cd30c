class QuizAppError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(QuizAppError):
    status_code = 400


class NotFoundError(QuizAppError):
    status_code = 404


class ConflictError(QuizAppError):
    status_code = 409
