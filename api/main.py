# api/main.py
from fastapi import FastAPI, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import os
from dotenv import load_dotenv
from .auth import get_api_key
from .rate_limit import register_rate_limit, limiter, RATE_LIMIT
from bookshelf import messages
from bookshelf.errors import BookshelfError
from bookshelf.models import BookPayload
from bookshelf.store import BookStore
import logging

load_dotenv()
API_HOST = os.getenv("API_HOST", "localhost")
API_PORT = int(os.getenv("API_PORT", "9000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("api")
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
for logger_name in ("api", "bookshelf"):
    logging.getLogger(logger_name).setLevel(LOG_LEVEL)
    logging.getLogger(logger_name).addHandler(handler)

app = FastAPI(title="Bookshelf API", version="1.0")
app.state.store = BookStore()

register_rate_limit(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# method -> validation message prefix for malformed bodies
BODY_ACTIONS = {"POST": "create", "PUT": "update"}


def get_store(request: Request) -> BookStore:
    """Return the BookStore attached to the running app."""
    return request.app.state.store


def envelope(status, message=None, data=None):
    """
    Build the JSON body shared by every response.

    Args:
        status (str): "success" or "fail"
        message (str, optional): Human-readable message, omitted when None
        data (dict, optional): Payload, omitted when None

    Returns:
        dict: {"status": ..., "message"?: ..., "data"?: ...}
    """
    body = {"status": status}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def parse_flag(value):
    """
    Decode a "1"/other query flag.

    Returns None for an absent or empty value (filter not applied),
    True for "1" and False for anything else.
    """
    if not value:
        return None
    return value == "1"


@app.exception_handler(BookshelfError)
async def bookshelf_error_handler(request: Request, exc: BookshelfError):
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
    )
    return JSONResponse(
        status_code=exc.status_code, content=envelope("fail", message=exc.message)
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    Render malformed requests (wrong JSON types, missing body) as 400 fail responses.

    The first pydantic error is logged; the client gets the action-specific
    "invalid data" message so all validation failures share one status code.
    """
    errors = exc.errors()
    logger.warning(
        f"{request.method} {request.url.path} rejected: {errors[0] if errors else exc}"
    )
    action = BODY_ACTIONS.get(request.method)
    if action:
        message = messages.for_action(action, messages.INVALID_PAYLOAD)
    else:
        message = messages.INVALID_PAYLOAD
    return JSONResponse(status_code=400, content=envelope("fail", message=message))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope("fail", message=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.post("/books", dependencies=[Depends(get_api_key)])
@limiter.limit(RATE_LIMIT)
async def add_book(
    request: Request,
    payload: BookPayload,
    store: BookStore = Depends(get_store),
):
    """
    Create a book from the JSON body.

    Args:
        request (Request): FastAPI request object (required for rate limiting)
        payload (BookPayload): name, year, author, summary, publisher,
            pageCount, readPage, reading
        store (BookStore): Injected store

    Returns:
        JSONResponse: 201 with {"status": "success", "message", "data": {"bookId"}}

    Raises:
        BookValidationError: rendered as 400 by bookshelf_error_handler
    """
    book = store.create(payload)
    return JSONResponse(
        status_code=201,
        content=envelope(
            "success", message=messages.BOOK_ADDED, data={"bookId": book.id}
        ),
    )


@app.get("/books", dependencies=[Depends(get_api_key)])
@limiter.limit(RATE_LIMIT)
async def list_books(
    request: Request,
    name: Optional[str] = Query(None),
    reading: Optional[str] = Query(None),
    finished: Optional[str] = Query(None),
    store: BookStore = Depends(get_store),
):
    """
    List books with optional filtering.

    Args:
        request (Request): FastAPI request object (required for rate limiting)
        name (str, optional): Case-insensitive substring of the book name
        reading (str, optional): "1" for books being read, anything else for
            books not being read
        finished (str, optional): "1" for finished books, anything else for
            unfinished ones
        store (BookStore): Injected store

    Returns:
        JSONResponse: {"status": "success", "data": {"books": [{id, name, publisher}]}}

    Query Building:
        - Filters are combined with AND logic
        - Empty filters are omitted
        - Results keep insertion order
    """
    books = store.list(
        name=name, reading=parse_flag(reading), finished=parse_flag(finished)
    )
    return JSONResponse(
        envelope("success", data={"books": [b.to_summary() for b in books]})
    )


@app.get("/books/{book_id}", dependencies=[Depends(get_api_key)])
@limiter.limit(RATE_LIMIT)
async def get_book(
    request: Request, book_id: str, store: BookStore = Depends(get_store)
):
    """Return the full record of one book, 404 if the id is unknown."""
    book = store.get(book_id)
    return JSONResponse(envelope("success", data={"book": book.to_dict()}))


@app.put("/books/{book_id}", dependencies=[Depends(get_api_key)])
@limiter.limit(RATE_LIMIT)
async def edit_book(
    request: Request,
    book_id: str,
    payload: BookPayload,
    store: BookStore = Depends(get_store),
):
    """
    Replace a book's fields with the JSON body.

    Args:
        request (Request): FastAPI request object (required for rate limiting)
        book_id (str): Id of the book to update
        payload (BookPayload): Same body as create
        store (BookStore): Injected store

    Returns:
        JSONResponse: {"status": "success", "message"}; no id is echoed

    Note:
        The payload is validated before the id is looked up, so an invalid
        body for an unknown id is answered with 400, not 404.
    """
    store.update(book_id, payload)
    return JSONResponse(envelope("success", message=messages.BOOK_UPDATED))


@app.delete("/books/{book_id}", dependencies=[Depends(get_api_key)])
@limiter.limit(RATE_LIMIT)
async def delete_book(
    request: Request, book_id: str, store: BookStore = Depends(get_store)
):
    store.delete(book_id)
    return JSONResponse(envelope("success", message=messages.BOOK_DELETED))


# Run uvicorn externally or here
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=API_HOST, port=API_PORT, reload=True)
