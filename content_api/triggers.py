# ============================================================================
# CLAUDE CONTEXT - CONTENT API HTTP TRIGGERS
# ============================================================================
# STATUS: Trigger Layer - HTTP handler for the contact form
# PURPOSE: Azure Functions HTTP handler for kontakt submissions
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: get_content_triggers, KontaktSubmitTrigger
# DEPENDENCIES: azure-functions, .service
# ============================================================================
"""
Content API HTTP Triggers (SYNC VERSION).

Endpoints:
- POST /api/kontakt - Validate and store a contact form submission

Response body in every case:
    {"success": bool, "message": str, "data"?: <created kontakt record>}

Messages are German; the site has no other locale.
"""

import re
import logging
import json
from typing import Dict, Any, List, Optional, Union

import azure.functions as func

from util_logger import LoggerFactory, ComponentType
from .models import KontaktSubmission
from .service import ContentService, get_content_service

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

REQUIRED_FIELDS = ('name', 'email', 'subject', 'message')

MSG_MISSING_FIELDS = "Bitte füllen Sie alle erforderlichen Felder aus."
MSG_INVALID_EMAIL = "Bitte geben Sie eine gültige E-Mail-Adresse ein."
MSG_SUCCESS = "Vielen Dank für Ihre Nachricht! Wir werden uns bald bei Ihnen melden."
MSG_FAILURE = "Es ist ein Fehler aufgetreten. Bitte versuchen Sie es später erneut."


# ============================================================================
# TRIGGER REGISTRY FUNCTION
# ============================================================================

def get_content_triggers() -> List[Dict[str, Any]]:
    """
    Get list of Content API trigger configurations for function_app.py.

    Returns:
        List of dicts with keys:
        - route: URL route pattern
        - methods: List of HTTP methods
        - handler: Callable trigger handler
    """
    return [
        {
            'route': 'kontakt',
            'methods': ['POST'],
            'handler': KontaktSubmitTrigger().handle
        },
    ]


# ============================================================================
# VALIDATION
# ============================================================================

def _is_filled(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def is_valid_email(email: str) -> bool:
    """local-part@domain.tld, no whitespace, at least one dot after the @."""
    return EMAIL_PATTERN.fullmatch(email) is not None


# ============================================================================
# KONTAKT TRIGGER
# ============================================================================

class KontaktSubmitTrigger:
    """
    Contact form submission.

    POST /api/kontakt
        {"name": "...", "email": "...", "phone": "...", "subject": "...", "message": "..."}

    400 for missing fields or a malformed email (no CMS call is made),
    200 with the created record, 500 for anything else.
    """

    def __init__(
        self,
        service: Optional[ContentService] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            service: Content service; the process-wide one when omitted,
                resolved lazily so registering routes never touches the network config.
            logger: Diagnostic logger for request-level failures.
        """
        self._service = service
        self.logger = logger or LoggerFactory.create_logger(
            ComponentType.TRIGGER, "KontaktSubmitTrigger"
        )

    @property
    def service(self) -> ContentService:
        if self._service is None:
            self._service = get_content_service()
        return self._service

    def _response(
        self,
        success: bool,
        message: str,
        status_code: int,
        data: Optional[Dict[str, Any]] = None
    ) -> func.HttpResponse:
        """Create the JSON response envelope."""
        body: Dict[str, Any] = {"success": success, "message": message}
        if data is not None:
            body["data"] = data
        return func.HttpResponse(
            json.dumps(body, default=str, ensure_ascii=False),
            status_code=status_code,
            mimetype="application/json",
            charset="utf-8"
        )

    def _parse(self, req: func.HttpRequest) -> Union[KontaktSubmission, str]:
        """
        Validated submission, or the 400 message explaining what is wrong.

        Raises:
            ValueError: Body is not a JSON object
            ValidationError: A required field is present but not a string
        """
        data = req.get_json()
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")

        if not all(_is_filled(data.get(key)) for key in REQUIRED_FIELDS):
            return MSG_MISSING_FIELDS

        if not isinstance(data['email'], str) or not is_valid_email(data['email']):
            return MSG_INVALID_EMAIL

        return KontaktSubmission(
            name=data['name'],
            email=data['email'],
            phone=data.get('phone') or None,
            subject=data['subject'],
            message=data['message']
        )

    def handle(self, req: func.HttpRequest) -> func.HttpResponse:
        """Handle kontakt submission."""
        try:
            submission = self._parse(req)
        except Exception as e:
            self.logger.error(
                f"Error processing contact form: {e}",
                exc_info=True,
                extra={'custom_dimensions': {'error_type': type(e).__name__}}
            )
            return self._response(False, MSG_FAILURE, 500)

        if isinstance(submission, str):
            return self._response(False, submission, 400)

        try:
            record = self.service.submit_kontakt_form(submission)
        except Exception:
            # ContentService.submit_kontakt_form has already logged the failure
            return self._response(False, MSG_FAILURE, 500)

        return self._response(
            True,
            MSG_SUCCESS,
            200,
            data=record.model_dump(mode="json", exclude_unset=True) if record else None
        )
