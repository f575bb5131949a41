from .catalog_source import CatalogSourcePort
from .markup import MarkupNode, MarkupParser
from .stream_resolver import StreamResolverPort

__all__ = [
    "CatalogSourcePort",
    "MarkupNode",
    "MarkupParser",
    "StreamResolverPort",
]
