"""
podhealth Web Blueprints Package.

This package contains Flask Blueprints for modular route organization.
Routes reach the shared AppState through get_app_state().
"""

from flask import current_app

from core.app_state import AppState

APP_STATE_KEY = "podhealth"


def get_app_state() -> AppState:
    """Returns the AppState attached to the running Flask app."""
    return current_app.extensions[APP_STATE_KEY]


__all__ = ["APP_STATE_KEY", "get_app_state"]
