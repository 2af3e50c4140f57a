"""
Admin System Schemas

Access log listing and configuration editing.
"""

from datetime import datetime as dt

from pydantic import BaseModel

from tripgo.schemas.responses import list_data_model


class AccessLogResponse(BaseModel):
    """Access log entry"""
    id: int
    request_id: str
    tenant_id: int | None = None
    user_id: int | None = None
    method: str
    path: str
    query_string: str | None = None
    client_ip: str | None = None
    status_code: int
    response_time_ms: float | None = None
    created_at: dt

    class Config:
        from_attributes = True


AccessLogListData = list_data_model("AccessLogListData", "logs", AccessLogResponse)


class ConfigResponse(BaseModel):
    """Editable configuration sections"""
    application: dict
    tenancy: dict
    catalog: dict
    rate_limiting: dict
    client: dict


class ConfigUpdateRequest(BaseModel):
    """Partial configuration update; only provided sections are merged"""
    application: dict | None = None
    tenancy: dict | None = None
    catalog: dict | None = None
    rate_limiting: dict | None = None
    client: dict | None = None


class ConfigUpdateResponse(BaseModel):
    """Response after config update"""
    changed_fields: list[str]
    restart_required: bool
    restart_required_fields: list[str]
    message: str
