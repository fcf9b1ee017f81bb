# bookshelf/store.py
import logging

from . import messages
from .errors import BookNotFoundError
from .models import Book
from .utils import generate_book_id, utc_now_iso
from .validation import validate_book_payload

logger = logging.getLogger("bookshelf.store")


class BookStore:
    """
    In-memory, insertion-ordered collection of books.

    Owns a mapping of id -> Book. One instance is created per application and
    handed to request handlers; nothing here is module-level state.

    Note:
        No locking. Callers sharing a store across threads must serialise
        access themselves.
    """

    def __init__(self, id_factory=generate_book_id, clock=utc_now_iso):
        self._books = {}
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self):
        return len(self._books)

    def __contains__(self, book_id):
        return book_id in self._books

    def clear(self):
        self._books.clear()

    def _new_id(self):
        book_id = self._id_factory()
        while book_id in self._books:
            logger.warning(f"Generated id {book_id} already in use, drawing again")
            book_id = self._id_factory()
        return book_id

    def create(self, payload):
        """
        Validate a payload and append a new book to the store.

        Args:
            payload (BookPayload): Field values for the new book

        Returns:
            Book: The stored record, including its generated id

        Raises:
            BookValidationError: if the payload breaks a validation rule

        Derived Fields:
            - finished: page_count == read_page
            - inserted_at / updated_at: the same timestamp from the clock
        """
        validate_book_payload(payload, "create")

        now = self._clock()
        book = Book(
            id=self._new_id(),
            name=payload.name,
            year=payload.year,
            author=payload.author,
            summary=payload.summary,
            publisher=payload.publisher,
            page_count=payload.page_count,
            read_page=payload.read_page,
            finished=payload.page_count == payload.read_page,
            reading=bool(payload.reading),
            inserted_at=now,
            updated_at=now,
        )
        self._books[book.id] = book
        logger.info(f"Added book {book.id} ({book.name!r})")
        return book

    def list(self, name=None, reading=None, finished=None):
        """
        Return books matching every given filter, in insertion order.

        Args:
            name (str, optional): Case-insensitive substring of the book name
            reading (bool, optional): Required value of `reading`
            finished (bool, optional): Required value of `finished`

        Returns:
            list[Book]: Matching books; empty when nothing matches

        Note:
            A filter left as None (or an empty name) is not applied.
        """
        books = list(self._books.values())

        if name:
            needle = name.lower()
            books = [b for b in books if needle in b.name.lower()]

        if reading is not None:
            books = [b for b in books if b.reading == reading]

        if finished is not None:
            books = [b for b in books if b.finished == finished]

        logger.debug(f"Listed {len(books)} of {len(self._books)} books")
        return books

    def get(self, book_id):
        """Return the book with `book_id` or raise BookNotFoundError."""
        book = self._books.get(book_id)
        if book is None:
            raise BookNotFoundError(messages.BOOK_NOT_FOUND)
        return book

    def update(self, book_id, payload):
        """
        Replace every field of a stored book except its id and inserted_at.

        Args:
            book_id (str): Id of the book to update
            payload (BookPayload): New field values, validated on their own

        Returns:
            Book: The updated record

        Raises:
            BookValidationError: if the payload is invalid. Checked before
                the id, so a bad payload for a missing id reports this.
            BookNotFoundError: if the payload is valid but no book has the id
        """
        validate_book_payload(payload, "update")

        current = self._books.get(book_id)
        if current is None:
            raise BookNotFoundError(messages.UPDATE_ID_NOT_FOUND)

        book = current.model_copy(
            update={
                "name": payload.name,
                "year": payload.year,
                "author": payload.author,
                "summary": payload.summary,
                "publisher": payload.publisher,
                "page_count": payload.page_count,
                "read_page": payload.read_page,
                "finished": payload.page_count == payload.read_page,
                "reading": bool(payload.reading),
                "updated_at": self._clock(),
            }
        )
        self._books[book_id] = book
        logger.info(f"Updated book {book_id}")
        return book

    def delete(self, book_id):
        """Remove the book with `book_id`; raise BookNotFoundError if absent."""
        if book_id not in self._books:
            raise BookNotFoundError(messages.DELETE_ID_NOT_FOUND)
        del self._books[book_id]
        logger.info(f"Deleted book {book_id}")
