"""
Content API Module.

Read access to the website's Directus collections plus the contact form
endpoint.

Endpoints:
- POST /api/kontakt - Contact form submission

Page code uses the service directly:
    from content_api import get_content_service

    service = get_content_service()
    slides = service.get_hero_slides()

Integration (in function_app.py):
    from content_api import get_content_triggers
"""

from .service import ContentService, get_content_service
from .triggers import get_content_triggers

__all__ = ['ContentService', 'get_content_service', 'get_content_triggers']
