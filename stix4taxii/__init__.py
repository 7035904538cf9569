from .common import STIX_VERSION, CommonObjectProperties
from .config import get_config, load_collections
from .objects import (
    DomainName,
    Grouping,
    IPv4Address,
    ObservedData,
    Report,
    new,
    parse
)
from .resources import (
    MEDIA_TYPE_STIX_V21,
    MEDIA_TYPE_TAXII_V21,
    APIRoot,
    Collection,
    CollectionRecord,
    Collections,
    Discovery,
    init_collection,
    init_collections,
    new_api_root,
    new_collection,
    new_collection_record,
    new_collections,
    new_discovery
)

__version__ = '0.0.1'
