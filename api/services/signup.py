"""Signup greeting service."""

from typing import Any, Dict

SIGNUP_GREETING = "Hello from the handle_signup function!"


def build_signup_greeting() -> Dict[str, Any]:
    """
    Build the response payload for the handle_signup function.

    A new dict is returned on every call so callers never share state.
    """
    return {"message": SIGNUP_GREETING}
