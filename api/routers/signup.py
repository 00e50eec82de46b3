"""
Signup router - HTTP endpoint for the handle_signup function
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from api.services.signup import build_signup_greeting
import logging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["signup"])


# Pydantic model for response validation
class SignupGreeting(BaseModel):
    message: str


async def handle_signup(request: Request) -> JSONResponse:
    """
    Answer any request with the fixed signup greeting.
    Method, path, headers, query and body are all ignored.
    """
    logger.debug(f"handle_signup invoked: {request.method} {request.url.path}")
    greeting = SignupGreeting(**build_signup_greeting())
    return JSONResponse(greeting.model_dump())


# Plain route with no method filter, so every method (TRACE, PROPFIND, custom...) reaches the handler
router.add_route("/{path:path}", handle_signup, include_in_schema=False)
