# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the storefront's business logic:
# - models/: Pydantic schemas for request and response bodies
# - services/: MongoDB-backed services, one per resource
#
# Routers stay thin: they parse HTTP input and delegate to a service.
# Services raise app.exceptions errors; they never build responses.
# =============================================================================
