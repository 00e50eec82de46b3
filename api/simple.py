"""
Framework-free handle_signup handler for runtimes that call Python directly
"""
import json
from api.services.signup import build_signup_greeting


def handler(event, context):
    """Return the signup greeting as a Lambda proxy response. Event and context are ignored."""
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(build_signup_greeting(), separators=(',', ':'))
    }
