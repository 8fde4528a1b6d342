"""Content pipeline interfaces."""

from .assembler import assemble_collection, load_collection
from .models import ContentRecord, ParsedDocument, StaticPageSpec
from .ordering import sort_records
from .views import filter_by_tag, group_by_section

__all__ = [
    "ContentRecord",
    "ParsedDocument",
    "StaticPageSpec",
    "assemble_collection",
    "filter_by_tag",
    "group_by_section",
    "load_collection",
    "sort_records",
]
