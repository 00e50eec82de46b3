#!/usr/bin/env python3
"""
Local server for the handle_signup function
Run with: python dev.py, then curl http://localhost:8000/
"""
import uvicorn
from api.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "index:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
