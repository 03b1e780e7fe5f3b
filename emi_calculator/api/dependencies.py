"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request

from emi_calculator.config import Settings, settings
from emi_calculator.presentation.store import FormStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


def get_form_store(app_settings: Settings = Depends(get_settings)) -> FormStore:
    """Provide a fresh form store for one request"""
    return FormStore(allow_zero_rate=app_settings.allow_zero_rate)
