from __future__ import annotations

from typing import Any, ClassVar, Dict, FrozenSet, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

MetaValue = Union[str, int, float, bool, None]

ContentStatus = Literal["publish", "future", "draft", "pending", "private"]
DiscussionStatus = Literal["open", "closed"]
SortOrder = Literal["asc", "desc"]
ContentOrderBy = Literal[
    "author",
    "date",
    "id",
    "include",
    "modified",
    "parent",
    "relevance",
    "slug",
    "include_slugs",
    "title",
]
PageOrderBy = Literal[
    "author",
    "date",
    "id",
    "include",
    "modified",
    "parent",
    "relevance",
    "slug",
    "include_slugs",
    "title",
    "menu_order",
]
MediaType = Literal["image", "video", "text", "application", "audio"]
ProductStatus = Literal["draft", "pending", "private", "publish"]
ProductType = Literal["simple", "grouped", "external", "variable"]
StockStatus = Literal["instock", "outofstock", "onbackorder"]
OrderStatus = Literal[
    "pending",
    "processing",
    "on-hold",
    "completed",
    "cancelled",
    "refunded",
    "failed",
]
ReportPeriod = Literal["day", "week", "month", "year"]


# --- Filter models (query parameters) ---


class FilterModel(BaseModel):
    """
    Whitelisted query parameters for one resource.
    Unknown keys are rejected and values are never coerced (strict mode).
    Array fields default to comma-joined serialization; names listed in
    `repeat_fields` are sent as repeated `name[]=value` pairs instead.
    """

    repeat_fields: ClassVar[FrozenSet[str]] = frozenset()

    model_config = ConfigDict(extra="forbid", strict=True)


class PageQuery(FilterModel):
    per_page: Optional[int] = Field(default=None, ge=1, le=100)
    page: Optional[int] = Field(default=None, ge=1)
    search: Optional[str] = None


class ContentFilters(PageQuery):
    """Filter vocabulary shared by posts, pages, blocks and media."""

    repeat_fields: ClassVar[FrozenSet[str]] = frozenset({"slug"})

    after: Optional[str] = None
    before: Optional[str] = None
    exclude: Optional[List[int]] = None
    include: Optional[List[int]] = None
    offset: Optional[int] = Field(default=None, ge=0)
    order: Optional[SortOrder] = None
    orderby: Optional[ContentOrderBy] = None
    slug: Optional[List[str]] = None
    status: Optional[ContentStatus] = None


class PostFilters(ContentFilters):
    author: Optional[int] = None
    author_exclude: Optional[List[int]] = None
    categories: Optional[List[int]] = None
    categories_exclude: Optional[List[int]] = None
    tags: Optional[List[int]] = None
    tags_exclude: Optional[List[int]] = None
    sticky: Optional[bool] = None


class PageFilters(ContentFilters):
    author: Optional[int] = None
    author_exclude: Optional[List[int]] = None
    menu_order: Optional[int] = None
    orderby: Optional[PageOrderBy] = None
    parent: Optional[int] = None
    parent_exclude: Optional[List[int]] = None


class BlockFilters(ContentFilters):
    pass


class MediaFilters(ContentFilters):
    author: Optional[int] = None
    author_exclude: Optional[List[int]] = None
    parent: Optional[int] = None
    parent_exclude: Optional[List[int]] = None
    # attachments use "inherit"/"private" etc., so status is not an enum here
    status: Optional[str] = None
    media_type: Optional[MediaType] = None
    mime_type: Optional[str] = None


class ThemeFilters(FilterModel):
    status: Optional[Literal["active", "inactive"]] = None
    search: Optional[str] = None


class ProductFilters(PageQuery):
    category: Optional[int] = None
    tag: Optional[int] = None
    status: Optional[ProductStatus] = None
    featured: Optional[bool] = None
    type: Optional[ProductType] = None
    sku: Optional[str] = None
    min_price: Optional[str] = None
    max_price: Optional[str] = None
    stock_status: Optional[StockStatus] = None


class OrderFilters(PageQuery):
    status: Optional[OrderStatus] = None
    customer: Optional[int] = None
    product: Optional[int] = None
    date_created_min: Optional[str] = None
    date_created_max: Optional[str] = None
    after: Optional[str] = None
    before: Optional[str] = None


class SalesReportQuery(FilterModel):
    """Aggregate report query, not a pagination filter."""

    period: Optional[ReportPeriod] = None
    date_min: Optional[str] = None
    date_max: Optional[str] = None
    product: Optional[int] = None
    category: Optional[int] = None


# --- Payload models (request bodies) ---


class PayloadModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)


class _ContentPayload(PayloadModel):
    title: Optional[str] = None
    content: Optional[str] = None
    status: Optional[ContentStatus] = None
    slug: Optional[str] = None
    meta: Optional[Dict[str, MetaValue]] = None


class PostPayload(_ContentPayload):
    author: Optional[int] = None
    excerpt: Optional[str] = None
    featured_media: Optional[int] = None
    comment_status: Optional[DiscussionStatus] = None
    ping_status: Optional[DiscussionStatus] = None
    format: Optional[str] = None
    sticky: Optional[bool] = None
    template: Optional[str] = None
    categories: Optional[List[int]] = None
    tags: Optional[List[int]] = None
    password: Optional[str] = None


class PagePayload(_ContentPayload):
    author: Optional[int] = None
    excerpt: Optional[str] = None
    featured_media: Optional[int] = None
    comment_status: Optional[DiscussionStatus] = None
    ping_status: Optional[DiscussionStatus] = None
    parent: Optional[int] = None
    menu_order: Optional[int] = None
    template: Optional[str] = None
    password: Optional[str] = None


class BlockPayload(_ContentPayload):
    pass


class MediaPayload(PayloadModel):
    title: Optional[str] = None
    caption: Optional[str] = None
    description: Optional[str] = None
    alt_text: Optional[str] = None
    author: Optional[int] = None
    comment_status: Optional[DiscussionStatus] = None
    ping_status: Optional[DiscussionStatus] = None
    meta: Optional[Dict[str, MetaValue]] = None
    template: Optional[str] = None
    post: Optional[int] = None


class ThemeCustomization(PayloadModel):
    """Fixed set of customizable site/theme settings."""

    site_title: Optional[str] = None
    blogdescription: Optional[str] = None
    header_textcolor: Optional[str] = None
    background_color: Optional[str] = None
    link_color: Optional[str] = None
    custom_logo: Optional[int] = None
    custom_css: Optional[str] = None


class TermRef(PayloadModel):
    id: int


class ImageRef(PayloadModel):
    id: Optional[int] = None
    src: Optional[str] = None
    alt: Optional[str] = None


class MetaDataEntry(PayloadModel):
    key: str
    value: Any


class ProductPayload(PayloadModel):
    name: Optional[str] = None
    type: Optional[ProductType] = None
    status: Optional[ProductStatus] = None
    featured: Optional[bool] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    regular_price: Optional[str] = None
    sale_price: Optional[str] = None
    manage_stock: Optional[bool] = None
    stock_quantity: Optional[int] = None
    stock_status: Optional[StockStatus] = None
    categories: Optional[List[TermRef]] = None
    tags: Optional[List[TermRef]] = None
    images: Optional[List[ImageRef]] = None
    meta_data: Optional[List[MetaDataEntry]] = None


class OrderPayload(PayloadModel):
    status: Optional[OrderStatus] = None
    customer_id: Optional[int] = None
    customer_note: Optional[str] = None
    billing: Optional[Dict[str, str]] = None
    shipping: Optional[Dict[str, str]] = None
    set_paid: Optional[bool] = None
    meta_data: Optional[List[MetaDataEntry]] = None


__all__ = [
    "FilterModel",
    "PayloadModel",
    "ContentFilters",
    "PostFilters",
    "PageFilters",
    "BlockFilters",
    "MediaFilters",
    "ThemeFilters",
    "ProductFilters",
    "OrderFilters",
    "SalesReportQuery",
    "PostPayload",
    "PagePayload",
    "BlockPayload",
    "MediaPayload",
    "ThemeCustomization",
    "ProductPayload",
    "OrderPayload",
    "TermRef",
    "ImageRef",
    "MetaDataEntry",
]
