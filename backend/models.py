"""
Pydantic API Models

Request/response models for the backend API.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, List


class SessionStartRequest(BaseModel):
    """Request to open a new form session."""
    submit_action: Optional[str] = Field(None, description="Override the form's submit action")


class FieldChangeRequest(BaseModel):
    """A raw input change on one field."""
    field: str = Field(..., description="Field name")
    value: str = Field(..., description="Raw input value, before sanitization")


class FieldBlurRequest(BaseModel):
    """A focus loss on one field."""
    field: str = Field(..., description="Field name")
    value: Optional[str] = Field(None, description="Value at blur time; defaults to the stored value")


class FieldState(BaseModel):
    """Render state of one field."""
    name: str
    current_value: str
    error: Optional[str] = None
    touched: bool = False
    is_valid: bool = False
    is_invalid: bool = False
    char_count: int = 0


class FormSessionResponse(BaseModel):
    """Full state of a form session."""
    session_id: str
    form_id: str
    values: Dict[str, str] = {}
    errors: Dict[str, str] = {}
    submit_attempted: bool = False
    submit_succeeded: bool = False
    fields: Dict[str, FieldState] = {}


class FieldInfo(BaseModel):
    """Static description of a field."""
    name: str
    label: str
    required: bool
    max_length: Optional[int] = None


class FormInfo(BaseModel):
    """Summary info about a registered form."""
    id: str
    name: str
    description: str
    field_count: int
    required_field_count: int
    optional_field_count: int
    fields: List[FieldInfo] = []


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    forms_loaded: int = 0
    active_sessions: int = 0
