"""FastAPI application for the typomd local JSON API."""

import logging
import secrets
from typing import Any

try:
    from fastapi import Depends, FastAPI, HTTPException, Security
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
    from pydantic import BaseModel

    FASTAPI_AVAILABLE = True
except ImportError:
    FASTAPI_AVAILABLE = False

from ..config import OUTPUT_FORMATS
from ..export import document_to_dict

logger = logging.getLogger("typomd.api")


def generate_token() -> str:
    """Generate a random bearer token."""
    return secrets.token_urlsafe(32)


def create_app(runtime: Any, token: str | None = None, enable_cors: bool = False) -> Any:
    """
    Create FastAPI application with runtime injected.

    Args:
        runtime: Runtime instance with parser and renderers
        token: Bearer token for authentication (None to disable auth)
        enable_cors: Enable CORS middleware

    Returns:
        FastAPI application instance
    """
    if not FASTAPI_AVAILABLE:
        raise ImportError("FastAPI not available. Install with: pip install typomd[api]")

    class ParseRequest(BaseModel):
        text: str

    class RenderRequest(BaseModel):
        text: str
        format: str | None = None

    app = FastAPI(
        title="typomd API",
        description="Parse and render model output markdown",
        version="0.1.0",
        docs_url="/docs" if token is None else None,
        redoc_url="/redoc" if token is None else None,
    )

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if token:
        security_scheme = HTTPBearer(auto_error=False)

        async def verify_token(
            credentials: HTTPAuthorizationCredentials | None = Security(security_scheme),  # noqa: B008
        ) -> None:
            """Verify bearer token."""
            if credentials is None or credentials.credentials != token:
                raise HTTPException(status_code=401, detail="Invalid or missing token")
    else:

        async def verify_token() -> None:
            """No-op when auth is disabled."""
            return None

    @app.get("/health")  # type: ignore[misc]
    async def health(auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "formats": list(OUTPUT_FORMATS)}

    @app.post("/parse")  # type: ignore[misc]
    async def parse(req: ParseRequest, auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Return blocks and inline spans for the given text."""
        doc = runtime.parser.parse(req.text)
        return document_to_dict(doc)

    @app.post("/render")  # type: ignore[misc]
    async def render(req: RenderRequest, auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Render text as html, text, json or yaml."""
        fmt = req.format or runtime.config.render.format
        if fmt not in OUTPUT_FORMATS:
            raise HTTPException(status_code=400, detail=f"Unknown format: {fmt}")
        doc = runtime.parser.parse(req.text)
        logger.debug("render %s: %d blocks", fmt, len(doc))
        return {"format": fmt, "output": runtime.output(doc, fmt)}

    return app
