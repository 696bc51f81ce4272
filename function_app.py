# ============================================================================
# CLAUDE CONTEXT - AZURE FUNCTIONS ENTRY POINT
# ============================================================================
# STATUS: Core Infrastructure - Function App Entry Point
# PURPOSE: Main entry point for Azure Functions runtime with the content API
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: app (FunctionApp instance)
# DEPENDENCIES: azure-functions, content_api, health
# ============================================================================

"""
Azure Functions Entry Point

Registers the HTTP triggers:
    - Content API: POST /api/kontakt (contact form)
    - Health checks:
        - /api/health - Public (minimal response)
        - /api/health/detailed - Internal (full metrics)

Content reads are not HTTP endpoints; the page layer imports
content_api.get_content_service() directly.

Deployment:
    - Local: func start
    - Azure: func azure functionapp publish <app-name> --python --build remote
"""

import json
import logging

import azure.functions as func

from config import validate_configuration
from health import get_app_identity, get_public_health, get_detailed_health, HealthStatus

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = func.FunctionApp()

# ============================================================================
# Content API - 1 Endpoint
# ============================================================================

try:
    from content_api import get_content_triggers

    logger.info("Registering Content API endpoints...")

    content_triggers = get_content_triggers()

    @app.route(route="kontakt", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
    def kontakt_submit(req: func.HttpRequest) -> func.HttpResponse:
        return content_triggers[0]['handler'](req)

    logger.info("✅ Content API registered successfully (1 endpoint)")

except ImportError as e:
    logger.warning(f"⚠️ Content API module not available: {e}")
    logger.warning("Contact form endpoint will not be available")

# ============================================================================
# Health Check Endpoints - 2 Endpoints (Public + Detailed)
# ============================================================================

@app.route(route="health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """
    Public health check endpoint - minimal response for external callers.

    Always returns 200 - status in body indicates health.
    """
    result = get_public_health()

    return func.HttpResponse(
        json.dumps(result, default=str),
        mimetype="application/json",
        status_code=200,
        headers={"Cache-Control": "no-cache, no-store, must-revalidate"}
    )


@app.route(route="health/detailed", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health_detailed(req: func.HttpRequest) -> func.HttpResponse:
    """
    Detailed health check endpoint - for probes and operations.

    Returns 503 if unhealthy, 200 otherwise.
    """
    result = get_detailed_health()
    status_code = 503 if result["status"] == HealthStatus.UNHEALTHY.value else 200

    return func.HttpResponse(
        json.dumps(result, default=str, indent=2),
        mimetype="application/json",
        status_code=status_code,
        headers={"Cache-Control": "no-cache, no-store, must-revalidate"}
    )

# ============================================================================
# Application Startup
# ============================================================================

validate_configuration()

_app_identity = get_app_identity()

logger.info("="*60)
logger.info(f"{_app_identity['name']} - {_app_identity['description']}")
logger.info("="*60)
logger.info("Available endpoints:")
logger.info("  - POST /api/kontakt - Contact form submission")
logger.info("  - GET /api/health - Public health check (minimal)")
logger.info("  - GET /api/health/detailed - Detailed health")
logger.info("="*60)
