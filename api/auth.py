# api/auth.py
from fastapi import HTTPException, Security
import os
from fastapi.security.api_key import APIKeyHeader
from dotenv import load_dotenv

load_dotenv()
API_KEY = os.getenv("API_KEY")
APIKEY_NAME = "X-API-Key"
api_key_header = APIKeyHeader(name=APIKEY_NAME, auto_error=False)


async def get_api_key(api_key_header: str = Security(api_key_header)):
    """
    Validate the API key from the request header, when one is configured.

    FastAPI dependency guarding the /books routes. With no API_KEY set in the
    environment the service is open and every request passes.

    Args:
        api_key_header (str): API key extracted from X-API-Key header via
            Security dependency injection

    Returns:
        str | None: The validated API key, or None when auth is disabled

    Raises:
        HTTPException: 401 if API key header is missing
        HTTPException: 403 if API key is present but doesn't match API_KEY
    """
    if not API_KEY:
        return None
    if not api_key_header:
        raise HTTPException(status_code=401, detail="Missing API Key")
    if api_key_header != API_KEY:
        raise HTTPException(status_code=403, detail="Forbidden")
    return api_key_header
