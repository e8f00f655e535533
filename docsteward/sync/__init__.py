"""Documentation mirroring: mapping table and content transformer.

The engine lives in :mod:`docsteward.sync.engine`; it depends on
:mod:`docsteward.config`, which in turn loads the mapping table from here.
"""

from .mappings import DEFAULT_MAPPINGS, MappingTable, iter_entries, parse_mappings
from .transform import ContentTransformer, MalformedFrontMatterError, SyncNotice, SYNC_MARKER

__all__ = [
    "ContentTransformer",
    "DEFAULT_MAPPINGS",
    "MalformedFrontMatterError",
    "MappingTable",
    "SYNC_MARKER",
    "SyncNotice",
    "iter_entries",
    "parse_mappings",
]
