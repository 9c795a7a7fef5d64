"""Services for dictionary lookup and rendering."""

from oed_org.services.dictionary import LookupService, OxfordClient
from oed_org.services.formatter import format_org

__all__ = ["LookupService", "OxfordClient", "format_org"]
