# ============================================================================
# CLAUDE CONTEXT - HEALTH CHECK MODULE
# ============================================================================
# STATUS: Core Infrastructure - Health Monitoring
# PURPOSE: Public and detailed health checks against the Directus backend
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: get_public_health, get_detailed_health, HealthStatus
# DEPENDENCIES: services.directus_client, config, util_logger
# PATTERNS: Two-tier health checks (public/detailed)
# ============================================================================

"""
Health Check Module

1. Public Health (/api/health):
   - Returns only status and timestamp
   - Always returns 200 (status in body indicates health)

2. Detailed Health (/api/health/detailed):
   - CMS connectivity with latency
   - API module status
   - Returns 503 if unhealthy

Usage:
    from health import get_public_health, get_detailed_health

    result = get_public_health()
    # {"status": "healthy", "timestamp": "2026-10-19T12:00:00+00:00"}
"""

import time
import uuid
from enum import Enum
from datetime import datetime, timezone
from dataclasses import dataclass
from typing import Optional, Dict, Any

from config import get_app_config
from services.directus_client import DirectusClient
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "HealthService")

APP_NAME = "ewgx-content-api"
APP_DESCRIPTION = "Directus content access & contact form"


# ============================================================================
# Health Status Enum
# ============================================================================

class HealthStatus(str, Enum):
    """Health status values."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"      # Non-critical components failing
    UNHEALTHY = "unhealthy"    # Critical components failing


@dataclass
class CheckResult:
    """Result of a single health check."""
    status: str              # "pass" or "fail"
    latency_ms: float
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result = {
            "status": self.status,
            "latency_ms": round(self.latency_ms, 2),
            "message": self.message
        }
        if self.details:
            result["details"] = self.details
        return result


def get_app_identity() -> Dict[str, str]:
    return {"name": APP_NAME, "description": APP_DESCRIPTION}


# ============================================================================
# Health Check Functions
# ============================================================================

def check_cms_connectivity(
    client: Optional[DirectusClient] = None,
    timeout_seconds: float = 5.0
) -> CheckResult:
    """
    Check that Directus answers /server/ping.

    Critical check - failure means UNHEALTHY status.

    Args:
        client: Client to probe; a short-timeout client from AppConfig when omitted
        timeout_seconds: Timeout for the probe client

    Returns:
        CheckResult with reachability and latency
    """
    start_time = time.perf_counter()
    owns_client = client is None

    try:
        if client is None:
            client = DirectusClient(
                base_url=get_app_config().directus_url,
                timeout=timeout_seconds
            )
        response = client.ping()
        latency_ms = (time.perf_counter() - start_time) * 1000

        if not response.success:
            logger.warning(f"CMS ping failed: {response.error}")
            return CheckResult(
                status="fail",
                latency_ms=latency_ms,
                message=f"Directus unreachable (HTTP {response.status_code})",
                details={"error": response.error}
            )

        return CheckResult(
            status="pass",
            latency_ms=latency_ms,
            message="Directus reachable",
            details={"url": client.base_url}
        )

    except Exception as e:
        latency_ms = (time.perf_counter() - start_time) * 1000
        logger.error(f"CMS connectivity check failed: {e}")
        return CheckResult(
            status="fail",
            latency_ms=latency_ms,
            message=f"CMS connectivity check failed: {type(e).__name__}",
            details={"error": str(e)}
        )
    finally:
        if owns_client and client is not None:
            client.close()


def check_api_modules() -> CheckResult:
    """
    Check that the content_api module imports and registers its triggers.

    Non-critical check - failure means DEGRADED status.
    """
    start_time = time.perf_counter()

    try:
        from content_api import get_content_triggers
        triggers = get_content_triggers()
        latency_ms = (time.perf_counter() - start_time) * 1000
        return CheckResult(
            status="pass",
            latency_ms=latency_ms,
            message="All modules loaded",
            details={"content_api": {"available": True, "endpoints": len(triggers)}}
        )
    except Exception as e:
        latency_ms = (time.perf_counter() - start_time) * 1000
        return CheckResult(
            status="fail",
            latency_ms=latency_ms,
            message="No API modules available",
            details={"content_api": {"available": False, "error": str(e)}}
        )


# ============================================================================
# Main Entry Points
# ============================================================================

def get_public_health(client: Optional[DirectusClient] = None) -> Dict[str, Any]:
    """
    Get minimal health status for public endpoint.

    Returns:
        Dict with status and timestamp only
    """
    start_time = time.perf_counter()

    cms_result = check_cms_connectivity(client, timeout_seconds=3.0)
    status = HealthStatus.HEALTHY if cms_result.status == "pass" else HealthStatus.UNHEALTHY

    total_duration = (time.perf_counter() - start_time) * 1000

    logger.info("Public health check completed", extra={
        'custom_dimensions': {
            'status': status.value,
            'duration_ms': round(total_duration, 2),
            'check_type': 'public'
        }
    })

    return {
        "status": status.value,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


def get_detailed_health(client: Optional[DirectusClient] = None) -> Dict[str, Any]:
    """
    Get detailed health status for operations.

    Returns:
        Dict with full health metrics
    """
    start_time = time.perf_counter()
    request_id = str(uuid.uuid4())[:8]

    checks = {}
    critical_failures = []
    non_critical_failures = []

    cms_result = check_cms_connectivity(client)
    checks["cms"] = cms_result.to_dict()
    if cms_result.status == "fail":
        critical_failures.append("cms")

    modules_result = check_api_modules()
    checks["api_modules"] = modules_result.to_dict()
    if modules_result.status == "fail":
        non_critical_failures.append("api_modules")

    if critical_failures:
        status = HealthStatus.UNHEALTHY
    elif non_critical_failures:
        status = HealthStatus.DEGRADED
    else:
        status = HealthStatus.HEALTHY

    total_duration = (time.perf_counter() - start_time) * 1000

    logger.info("Detailed health check completed", extra={
        'custom_dimensions': {
            'status': status.value,
            'duration_ms': round(total_duration, 2),
            'check_type': 'detailed',
            'request_id': request_id,
            'critical_failures': critical_failures,
            'non_critical_failures': non_critical_failures,
            'cms_latency_ms': cms_result.latency_ms
        }
    })

    return {
        "status": status.value,
        "app": APP_NAME,
        "description": APP_DESCRIPTION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": request_id,
        "checks": checks,
        "total_duration_ms": round(total_duration, 2)
    }
