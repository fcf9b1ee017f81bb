# bookshelf/errors.py


class BookshelfError(Exception):
    """Base error for store operations; carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class BookValidationError(BookshelfError):
    status_code = 400


class BookNotFoundError(BookshelfError):
    status_code = 404
