# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Catering API:
# - test_app.py: Health, CORS, body limit, error envelope, routing
# - test_lifecycle.py: Startup sequence, lifespan and the uvicorn host
# - test_<resource>.py: Endpoint tests per resource against mongomock-motor
# - test_config.py / test_utils.py: Settings and shared helpers
#
# Run tests with: pytest
# =============================================================================
