# ============================================================================
# CLAUDE CONTEXT - CONTENT API MODELS
# ============================================================================
# STATUS: Standalone Models - Directus content entity contracts
# PURPOSE: Data-shape contracts for every CMS collection the site reads or writes
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: HeroSlide, StoreInfo, OpeningHours, Organization, AboutPage, CoreValue,
#          HistoryEvent, Belief, StaffMember, PageHeader, BlogPost,
#          KontaktSubmission, KontaktRecord, PUBLISHED, KONTAKT_STATUS_NEW
# INTERFACES: Pydantic BaseModel
# DEPENDENCIES: pydantic, typing
# VALIDATION: Pydantic v2 validation at the CMS boundary
# PATTERNS: Data Transfer Objects (DTOs)
# ============================================================================

"""
Content Entity Models

One model per CMS entity. Records are mirrored from Directus as-is: the
models only check shape, they never normalize values. Fields outside a
query's field selection simply stay None, and unknown keys are ignored.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

PUBLISHED = "published"
KONTAKT_STATUS_NEW = "new"


class CMSRecord(BaseModel):
    """Base for records read from Directus."""
    model_config = ConfigDict(extra="ignore")


# ============================================================================
# COLLECTIONS (status-gated, sorted server-side)
# ============================================================================

class HeroSlide(CMSRecord):
    """Homepage hero carousel slide."""
    id: Union[str, int]
    status: Optional[str] = None
    sort: Optional[int] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    image: Optional[str] = Field(
        default=None,
        description="Directus file id, pass to get_asset_url"
    )
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    date_created: Optional[str] = None
    date_updated: Optional[str] = None


class Organization(CMSRecord):
    id: int
    status: Optional[str] = None
    sort: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    link: Optional[str] = None


class CoreValue(CMSRecord):
    id: int
    status: Optional[str] = None
    sort: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None


class HistoryEvent(CMSRecord):
    """Entry on the about-page timeline. `year` is free text ("1975", "seit 2003")."""
    id: int
    status: Optional[str] = None
    sort: Optional[int] = None
    year: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class Belief(CMSRecord):
    id: int
    status: Optional[str] = None
    sort: Optional[int] = None
    title: Optional[str] = None
    content: Optional[str] = None


class StaffMember(CMSRecord):
    """Mitarbeiter entry. `sort` may be unset in the CMS."""
    id: int
    status: Optional[str] = None
    sort: Optional[int] = None
    name: Optional[str] = None
    position: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None


class BlogPost(CMSRecord):
    """
    Blog post.

    List queries omit `content`; the slug lookup selects it.
    """
    id: Union[int, str]
    status: Optional[str] = None
    title: Optional[str] = None
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    featured_image: Optional[str] = None
    author: Optional[str] = None
    published_date: Optional[str] = None
    tags: Optional[List[str]] = None
    date_created: Optional[str] = None


# ============================================================================
# SINGLETONS (no status gate)
# ============================================================================

class OpeningHours(BaseModel):
    days: Optional[str] = None
    hours: Optional[str] = None


class StoreInfo(CMSRecord):
    """Weltladen store details, fetched with fields=*."""
    id: Optional[int] = None
    store_name: Optional[str] = None
    street: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    phone: Optional[str] = None
    phone_secondary: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    location_description: Optional[str] = None
    opening_hours: Optional[List[OpeningHours]] = Field(
        default=None,
        description="Ordered opening-hours rows as entered in the CMS, None when unset"
    )


class AboutPage(CMSRecord):
    id: Optional[int] = None
    header_title: Optional[str] = None
    header_subtitle: Optional[str] = None
    header_background_image: Optional[str] = None
    mission_title: Optional[str] = None
    mission_text: Optional[str] = None
    vision_title: Optional[str] = None
    vision_text: Optional[str] = None
    mission_image: Optional[str] = None
    history_title: Optional[str] = None
    history_subtitle: Optional[str] = None


class PageHeader(CMSRecord):
    """Header block shared by the staff page and the blog page singletons."""
    id: Optional[int] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    background_image: Optional[str] = None


# ============================================================================
# KONTAKT (write-only)
# ============================================================================

class KontaktSubmission(BaseModel):
    """
    Caller-supplied contact form fields.

    Only these fields ever reach Directus; `id` and `status` are not
    caller-settable and are dropped if present on the input.
    """
    model_config = ConfigDict(extra="ignore")

    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str


class KontaktRecord(BaseModel):
    """Created kontakt item as returned by Directus."""
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None
    date_created: Optional[str] = None
