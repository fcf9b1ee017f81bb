# bookshelf/messages.py
# User-facing response messages. Clients match on these strings, keep verbatim.

ACTION_PREFIX = {
    "create": "Gagal menambahkan buku",
    "update": "Gagal memperbarui buku",
}

BOOK_ADDED = "Buku berhasil ditambahkan"
BOOK_UPDATED = "Buku berhasil diperbarui"
BOOK_DELETED = "Buku berhasil dihapus"

BOOK_NOT_FOUND = "Buku tidak ditemukan"
UPDATE_ID_NOT_FOUND = "Gagal memperbarui buku. Id tidak ditemukan"
DELETE_ID_NOT_FOUND = "Buku gagal dihapus. Id tidak ditemukan"

NAME_REQUIRED = "Mohon isi nama buku"
READ_PAGE_REQUIRED = "Mohon isi readPage"
PAGE_COUNT_REQUIRED = "Mohon isi pageCount"
READ_PAGE_EXCEEDS = "readPage tidak boleh lebih besar dari pageCount"
PAGE_COUNT_TOO_SMALL = "pageCount tidak boleh kurang dari 1"
INVALID_PAYLOAD = "Data buku tidak valid"


def for_action(action, reason):
    """Prefix a validation reason with the failing action, e.g. 'Gagal menambahkan buku. <reason>'."""
    return f"{ACTION_PREFIX[action]}. {reason}"
