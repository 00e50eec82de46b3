"""
FastAPI application for Vercel
Vercel auto-detects and deploys FastAPI apps at index.py
NO vercel.json or Mangum needed!
"""
import sys
import os

# Add project root to path so we can import from api/
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from api.app import create_app

# Create FastAPI app - Vercel will auto-detect this
app = create_app()
