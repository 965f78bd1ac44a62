"""
Backend API Service

FastAPI application exposing form sessions. A renderer opens a session
for a registered form, forwards change / blur / submit / reset events
and renders the returned field and form state.
"""

import logging
import sys
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from backend.config import (
    API_TITLE, API_DESCRIPTION, API_VERSION,
    BACKEND_HOST, BACKEND_PORT, LOG_LEVEL,
    MAX_SESSIONS, VERBOSE,
)
from backend.models import (
    SessionStartRequest, FieldChangeRequest, FieldBlurRequest,
    FormSessionResponse, FormInfo, HealthResponse,
)
from backend.session_store import SessionStore
from fieldkit.form.registry import get_registry
from fieldkit.form.session import FormSession

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

session_store = SessionStore(max_sessions=MAX_SESSIONS, verbose=VERBOSE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown."""
    logger.info("Starting fieldkit backend...")

    registry = get_registry()
    logger.info(f"Loaded {registry.form_count} form(s): {registry.form_ids}")

    yield

    logger.info(f"Shutdown complete ({session_store.count_active()} session(s) dropped)")


# Create app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session(session_id: str) -> FormSession:
    session = session_store.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _session_response(session: FormSession) -> FormSessionResponse:
    return FormSessionResponse(**session.snapshot())


# =========================================================================
# Health & Info Endpoints
# =========================================================================


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Check service health."""
    registry = get_registry()
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        forms_loaded=registry.form_count,
        active_sessions=session_store.count_active(),
    )


@app.get("/forms", response_model=list[FormInfo])
async def list_forms():
    """List all registered forms."""
    return get_registry().list_forms()


@app.get("/forms/{form_id}", response_model=FormInfo)
async def get_form(form_id: str):
    """Get details for a specific form."""
    registry = get_registry()
    form_def = registry.get_form(form_id)
    if not form_def:
        raise HTTPException(
            status_code=404,
            detail=f"Form not found: {form_id}. Available: {registry.form_ids}",
        )
    return form_def.to_dict()


# =========================================================================
# Session Endpoints
# =========================================================================


@app.post("/forms/{form_id}/sessions", response_model=FormSessionResponse)
async def start_session(form_id: str, request: Optional[SessionStartRequest] = None):
    """Open a new session for a form."""
    form_def = get_registry().get_form(form_id)
    if not form_def:
        raise HTTPException(status_code=404, detail=f"Form not found: {form_id}")

    submit_action = request.submit_action if request else None
    session = session_store.create(form_def, submit_action=submit_action)
    return _session_response(session)


@app.get("/sessions/{session_id}", response_model=FormSessionResponse)
async def get_session(session_id: str):
    """Get the current state of a session."""
    return _session_response(_get_session(session_id))


@app.delete("/sessions/{session_id}")
async def close_session(session_id: str):
    """Close a session."""
    if not session_store.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "closed", "session_id": session_id}


@app.post("/sessions/{session_id}/change", response_model=FormSessionResponse)
async def change_field(session_id: str, request: FieldChangeRequest):
    """Forward a raw input change to a field."""
    session = _get_session(session_id)
    try:
        session.change(request.field, request.value)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Field not found: {request.field}")
    return _session_response(session)


@app.post("/sessions/{session_id}/blur", response_model=FormSessionResponse)
async def blur_field(session_id: str, request: FieldBlurRequest):
    """Forward a focus loss to a field."""
    session = _get_session(session_id)
    try:
        session.blur(request.field, request.value)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Field not found: {request.field}")
    return _session_response(session)


@app.post("/sessions/{session_id}/submit", response_model=FormSessionResponse)
async def submit_form(session_id: str):
    """Re-validate every field and submit if nothing fails."""
    session = _get_session(session_id)
    session.submit()
    return _session_response(session)


@app.post("/sessions/{session_id}/reset", response_model=FormSessionResponse)
async def reset_form(session_id: str):
    """Clear every value and error."""
    session = _get_session(session_id)
    session.reset()
    return _session_response(session)


# =========================================================================
# Run
# =========================================================================

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting backend on port {BACKEND_PORT}")
    uvicorn.run(app, host=BACKEND_HOST, port=BACKEND_PORT)
