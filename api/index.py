import sys


def log_error(msg):
    """Log to stderr so it shows up in the serverless platform logs"""
    print(f"[ERROR] {msg}", file=sys.stderr, flush=True)


try:
    from mangum import Mangum
    from api.app import create_app

    app = create_app()

    # Serverless handler - this is the entry point
    handler = Mangum(app, lifespan="off")

except Exception as e:
    log_error(f"CRITICAL ERROR during module initialization: {e}")
    import traceback
    log_error(f"Traceback: {traceback.format_exc()}")

    # Create a minimal emergency handler
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse
    from mangum import Mangum

    startup_error = str(e)
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    async def emergency_handler(request):
        return JSONResponse(
            status_code=500,
            content={
                "status": "error",
                "message": f"Function failed to initialize: {startup_error}"
            }
        )

    # No method filter, same as the signup route
    app.add_route("/{path:path}", emergency_handler, include_in_schema=False)

    handler = Mangum(app, lifespan="off")
