"""
Services package - Business logic layer for the API
All functional logic should be implemented here, separate from HTTP routing
"""
from api.services.signup import SIGNUP_GREETING, build_signup_greeting

__all__ = ['SIGNUP_GREETING', 'build_signup_greeting']
