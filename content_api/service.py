# ============================================================================
# CLAUDE CONTEXT - CONTENT API SERVICE
# ============================================================================
# STATUS: Service Layer - Website content reads and contact submission
# PURPOSE: One read per CMS collection/singleton, asset URLs, kontakt writes
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: ContentService, get_content_service
# DEPENDENCIES: services.directus_client, httpx, pydantic, util_logger
# ============================================================================
"""
Content API Service Layer (SYNC VERSION).

Named queries the page templates call:
- get_hero_slides, get_organizations, get_core_values, get_history_timeline,
  get_beliefs, get_staff_members, get_blog_posts  -> list (possibly empty)
- get_store_info, get_about_page, get_staff_page_header,
  get_blog_page_header, get_blog_post_by_slug    -> record or None
- get_asset_url                                   -> str, no network
- submit_kontakt_form                             -> created record, raises

Reads are fail-soft: any failure is logged and turned into [] / None so a
page renders with an empty section instead of an error page. The kontakt
write is fail-loud: failures are logged and re-raised so the visitor can
see the submission did not go through.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from config import get_app_config
from services.directus_client import DirectusClient
from util_logger import LoggerFactory, ComponentType, log_exceptions
from .models import (
    PUBLISHED,
    KONTAKT_STATUS_NEW,
    HeroSlide,
    StoreInfo,
    Organization,
    AboutPage,
    CoreValue,
    HistoryEvent,
    Belief,
    StaffMember,
    PageHeader,
    BlogPost,
    KontaktSubmission,
    KontaktRecord,
)

T = TypeVar("T", bound=BaseModel)

PUBLISHED_FILTER = {"status": {"_eq": PUBLISHED}}

BLOG_POST_FIELDS = [
    'id', 'title', 'slug', 'excerpt', 'featured_image',
    'author', 'published_date', 'tags', 'status'
]

KONTAKT_COLLECTION = "kontakt"


class ContentService:
    """
    Website content access over a shared DirectusClient.

    Usage:
        service = ContentService()

        slides = service.get_hero_slides()
        url = service.get_asset_url(slides[0].image, width=1200, quality=80)
    """

    def __init__(
        self,
        client: Optional[DirectusClient] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            client: Directus client; built from AppConfig when omitted.
            logger: Diagnostic logger; tests pass a mock to observe or silence it.
        """
        if client is None:
            config = get_app_config()
            client = DirectusClient(
                base_url=config.directus_url,
                timeout=config.directus_timeout
            )
        self.client = client
        self.logger = logger or LoggerFactory.create_logger(
            ComponentType.SERVICE, "ContentService"
        )

    def close(self):
        """Close client connections."""
        self.client.close()

    # =========================================================================
    # Fail-soft helpers
    # =========================================================================

    def _list(
        self,
        model: Type[T],
        collection: str,
        fields: List[str],
        sort: List[str],
        label: str
    ) -> List[T]:
        """Published items of a collection, or [] on any failure."""
        try:
            items = self.client.read_items(
                collection,
                fields=fields,
                filter=PUBLISHED_FILTER,
                sort=sort
            )
            return [model.model_validate(item) for item in items]
        except Exception as e:
            self._log_read_failure(label, collection, e)
            return []

    def _singleton(
        self,
        model: Type[T],
        collection: str,
        fields: List[str],
        label: str
    ) -> Optional[T]:
        """Singleton record, or None on any failure."""
        try:
            item = self.client.read_singleton(collection, fields=fields)
            if item is None:
                return None
            return model.model_validate(item)
        except Exception as e:
            self._log_read_failure(label, collection, e)
            return None

    def _log_read_failure(self, label: str, collection: str, error: Exception):
        self.logger.error(
            f"Error fetching {label}: {error}",
            exc_info=True,
            extra={
                'custom_dimensions': {
                    'collection': collection,
                    'error_type': type(error).__name__,
                    'status_code': getattr(error, 'status_code', None)
                }
            }
        )

    # =========================================================================
    # Collections
    # =========================================================================

    def get_hero_slides(self) -> List[HeroSlide]:
        """Hero slides for the homepage, by sort then creation time."""
        return self._list(
            HeroSlide,
            'hero_slides',
            fields=['id', 'title', 'subtitle', 'image', 'button_text', 'button_link', 'sort'],
            sort=['sort', 'date_created'],
            label="hero slides"
        )

    def get_organizations(self) -> List[Organization]:
        """Member organizations of the Eine Welt Gruppe."""
        return self._list(
            Organization,
            'organizations',
            fields=['id', 'title', 'description', 'icon', 'color', 'link', 'sort'],
            sort=['sort'],
            label="organizations"
        )

    def get_core_values(self) -> List[CoreValue]:
        return self._list(
            CoreValue,
            'core_values',
            fields=['id', 'title', 'description', 'icon', 'color', 'sort'],
            sort=['sort'],
            label="core values"
        )

    def get_history_timeline(self) -> List[HistoryEvent]:
        return self._list(
            HistoryEvent,
            'history_timeline',
            fields=['id', 'year', 'title', 'description', 'sort'],
            sort=['sort'],
            label="history timeline"
        )

    def get_beliefs(self) -> List[Belief]:
        """Statement-of-faith entries."""
        return self._list(
            Belief,
            'beliefs',
            fields=['id', 'title', 'content', 'sort'],
            sort=['sort'],
            label="beliefs"
        )

    def get_staff_members(self) -> List[StaffMember]:
        """Mitarbeiter, by sort then name."""
        return self._list(
            StaffMember,
            'staff_members',
            fields=['id', 'name', 'position', 'bio', 'email', 'phone', 'photo', 'status', 'sort'],
            sort=['sort', 'name'],
            label="staff members"
        )

    def get_blog_posts(self) -> List[BlogPost]:
        """Published posts, newest first."""
        return self._list(
            BlogPost,
            'blog_posts',
            fields=BLOG_POST_FIELDS,
            sort=['-published_date', '-date_created'],
            label="blog posts"
        )

    def get_blog_post_by_slug(self, slug: str) -> Optional[BlogPost]:
        """
        Single published post by exact slug.

        Args:
            slug: URL slug of the post

        Returns:
            BlogPost with content, or None when missing, unpublished or unreachable
        """
        if not slug:
            return None
        try:
            items = self.client.read_items(
                'blog_posts',
                fields=BLOG_POST_FIELDS + ['content'],
                filter={
                    "slug": {"_eq": slug},
                    "status": {"_eq": PUBLISHED}
                },
                limit=1
            )
            if not items:
                return None
            return BlogPost.model_validate(items[0])
        except Exception as e:
            self._log_read_failure(f"blog post '{slug}'", 'blog_posts', e)
            return None

    # =========================================================================
    # Singletons
    # =========================================================================

    def get_store_info(self) -> Optional[StoreInfo]:
        """Store address, contact data and opening hours."""
        return self._singleton(StoreInfo, 'store_info', fields=['*'], label="store info")

    def get_about_page(self) -> Optional[AboutPage]:
        return self._singleton(AboutPage, 'about_page', fields=['*'], label="about page")

    def get_staff_page_header(self) -> Optional[PageHeader]:
        return self._singleton(
            PageHeader,
            'staff_page_header',
            fields=['title', 'subtitle', 'background_image'],
            label="staff page header"
        )

    def get_blog_page_header(self) -> Optional[PageHeader]:
        return self._singleton(
            PageHeader,
            'blog_page_header',
            fields=['title', 'subtitle', 'background_image'],
            label="blog page header"
        )

    # =========================================================================
    # Assets
    # =========================================================================

    def get_asset_url(
        self,
        file_id: Optional[str],
        width: Optional[int] = None,
        height: Optional[int] = None,
        fit: Optional[str] = None,
        quality: Optional[int] = None
    ) -> str:
        """
        Build a Directus asset URL with optional transforms.

        Only supplied parameters are added, always in the order
        width, height, fit, quality.

        Args:
            file_id: Directus file id; empty or None yields ""
            width: Target width in pixels
            height: Target height in pixels
            fit: cover | contain | inside | outside
            quality: 1-100

        Returns:
            Asset URL, or "" without a file id
        """
        if not file_id:
            return ""

        params = [
            (key, str(value))
            for key, value in (
                ('width', width),
                ('height', height),
                ('fit', fit),
                ('quality', quality),
            )
            if value
        ]
        url = f"{self.client.base_url}/assets/{file_id}"
        if params:
            url = f"{url}?{httpx.QueryParams(params)}"
        return url

    # =========================================================================
    # Kontakt
    # =========================================================================

    @log_exceptions()
    def submit_kontakt_form(self, submission: KontaktSubmission) -> Optional[KontaktRecord]:
        """
        Create a kontakt item.

        Status is always "new" and no id is sent; every other field goes
        through untouched. Phone is left out when not supplied.

        Returns:
            Created record as returned by Directus (None on 204 No Content)

        Raises:
            Exception: Any transport, backend or shape failure, after logging
        """
        payload: Dict[str, Any] = submission.model_dump(exclude_none=True)
        payload['status'] = KONTAKT_STATUS_NEW

        created = self.client.create_item(KONTAKT_COLLECTION, payload)
        if created is None:
            return None

        record = KontaktRecord.model_validate(created)
        self.logger.info(
            "Kontakt submission stored",
            extra={'custom_dimensions': {'kontakt_id': record.id}}
        )
        return record


@lru_cache(maxsize=1)
def get_content_service() -> ContentService:
    """
    Process-wide ContentService singleton.

    The underlying client only carries configuration and a connection
    pool, so one instance serves all concurrent invocations.
    """
    return ContentService()
