# bookshelf/validation.py
from . import messages
from .errors import BookValidationError


def validate_book_payload(payload, action):
    """
    Check a proposed create/update payload, failing on the first broken rule.

    Create and update share the same rules; only the message prefix differs.
    The payload is validated on its own, never merged with a stored book.

    Args:
        payload (BookPayload): Proposed field values
        action (str): "create" or "update", selects the message prefix

    Returns:
        None

    Raises:
        BookValidationError: with the message of the first failing rule

    Rule Order:
        1. name present and non-empty
        2. readPage present
        3. pageCount present
        4. readPage <= pageCount
        5. pageCount >= 1
    """
    if not payload.name:
        raise BookValidationError(messages.for_action(action, messages.NAME_REQUIRED))

    if payload.read_page is None:
        raise BookValidationError(
            messages.for_action(action, messages.READ_PAGE_REQUIRED)
        )

    if payload.page_count is None:
        raise BookValidationError(
            messages.for_action(action, messages.PAGE_COUNT_REQUIRED)
        )

    if payload.read_page > payload.page_count:
        raise BookValidationError(
            messages.for_action(action, messages.READ_PAGE_EXCEEDS)
        )

    if payload.page_count < 1:
        raise BookValidationError(
            messages.for_action(action, messages.PAGE_COUNT_TOO_SMALL)
        )
