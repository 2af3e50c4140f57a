### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Access Log Model -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Access Log Model

Records API requests for audit and analytics:
- Who: tenant and user that made the request
- What: HTTP method, path, response status
- When: Timestamp
- How long: Response time
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, Float, Index, Integer, String

from tripgo.database import Base


class AccessLog(Base):
    """Access log model - one row per storefront/API request"""

    __tablename__ = "access_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Request identification
    request_id = Column(String(36), nullable=False)

    # Who made the request (no FKs so logs outlive tenants and users)
    tenant_id = Column(Integer, nullable=True)
    user_id = Column(Integer, nullable=True)

    # Request details
    method = Column(String(10), nullable=False)
    path = Column(String(500), nullable=False)
    query_string = Column(String(1000), nullable=True)
    client_ip = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)

    # Response details
    status_code = Column(Integer, nullable=False)
    response_time_ms = Column(Float, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    __table_args__ = (
        Index("ix_access_logs_tenant_created", "tenant_id", "created_at"),
        Index("ix_access_logs_path_created", "path", "created_at"),
    )

    def __repr__(self):
        return f"<AccessLog(id={self.id}, method='{self.method}', path='{self.path}', status={self.status_code})>"

    @classmethod
    def create_from_request(
        cls,
        request_id: str,
        method: str,
        path: str,
        status_code: int,
        response_time_ms: float,
        tenant_id: int | None = None,
        user_id: int | None = None,
        query_string: str | None = None,
        client_ip: str | None = None,
        user_agent: str | None = None,
    ) -> "AccessLog":
        """
        Create an access log entry from request details.

        Returns:
            AccessLog instance (not yet committed to database)
        """
        return cls(
            request_id=request_id,
            method=method,
            path=path,
            status_code=status_code,
            response_time_ms=response_time_ms,
            tenant_id=tenant_id,
            user_id=user_id,
            query_string=query_string,
            client_ip=client_ip,
            user_agent=user_agent,
        )
