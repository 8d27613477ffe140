from .bases import StripeModel, StripeResource, StripeList, SearchResult, DeletedObject
from .expandable import Expandable, ExpandableCollection, DynamicExpandable
from .versions import ApiVersion, DEFAULT_API_VERSION

__all__ = [
    "StripeModel",
    "StripeResource",
    "StripeList",
    "SearchResult",
    "DeletedObject",
    "Expandable",
    "ExpandableCollection",
    "DynamicExpandable",
    "ApiVersion",
    "DEFAULT_API_VERSION",
]
