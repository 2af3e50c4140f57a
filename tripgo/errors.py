### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Application Errors -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Application Errors

Domain errors raised by services and routers. The central exception
handler in tripgo.main turns them into an ErrorResponse with the
matching HTTP status.
"""


class AppError(Exception):
    """An operational error with an HTTP status code"""

    def __init__(self, message: str, status_code: int = 500, headers: dict[str, str] | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.headers = headers

    def __repr__(self):
        return f"<AppError(status_code={self.status_code}, message='{self.message}')>"


def create_error(message: str, status_code: int = 500) -> AppError:
    """
    Build an AppError for raising.

    Usage:
        raise create_error("Tenant not found", 404)
    """
    return AppError(message, status_code)
