# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers, router mounting
# - server.py: uvicorn host with bounded graceful shutdown
# - lifecycle.py: Startup and shutdown sequence
# - config.py: Environment variable loading and settings
# - routers/: API endpoint definitions organized by resource
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================

import time

# Monotonic clock reading taken when the process first imports the app package
PROCESS_STARTED_AT = time.monotonic()
