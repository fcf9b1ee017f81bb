# bookshelf/utils.py
import secrets
from datetime import datetime, timezone

ID_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
ID_LENGTH = 16


def generate_book_id(size=ID_LENGTH):
    """
    Generate a random URL-safe identifier for a new book.

    Draws `size` characters from the 64-symbol nanoid alphabet using the
    cryptographically secure `secrets` module.

    Args:
        size (int): Length of the identifier. Defaults to 16.

    Returns:
        str: Random identifier, e.g. "Qbax5Oy7L8WKf74l"

    Note:
        Uniqueness is not guaranteed here; BookStore re-checks on insert.
    """
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def utc_now_iso():
    """Current UTC time as ISO-8601 with milliseconds and a 'Z' suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
