"""Configuration loading and registry bootstrap.

The configuration is a JSON file merged over :data:`DEFAULTS`::

    {
        "default_media_types": ["application/stix+json;version=2.1"],
        "collections": [
            {"id": "...", "title": "High Value Indicators",
             "can_read": true, "can_write": false, "enabled": true}
        ]
    }
"""
import copy
import logging
import os

from .common import STIX_VERSION
from .resources import MEDIA_TYPE_STIX_V21, init_collections
from .utils import load_data, update

logger = logging.getLogger(__name__)

CONFIG_ENV = 'STIX4TAXII_CONFIG'

DEFAULTS = {
    'spec_version': STIX_VERSION,
    'default_media_types': [MEDIA_TYPE_STIX_V21],
    'collections': [],
}


def get_config(path=None):
    """Load the configuration.

    Args:
        path (:obj:`str`, optional): JSON config file. Falls back to the file
            named by the ``STIX4TAXII_CONFIG`` environment variable; with
            neither, the defaults are returned.

    Returns:
        :obj:`dict`: The defaults updated with the file's contents.
    """
    config = copy.deepcopy(DEFAULTS)
    if path is None:
        path = os.environ.get(CONFIG_ENV)
    if path:
        logger.debug("Loading config from %s", path)
        update(config, load_data(path))
    return config


def load_collections(config):
    """Build a Collections registry from the ``collections`` config entries.

    Entries without ``media_types`` get the configured default media types.
    Entries without an ``id`` get one derived from their title.
    """
    registry = init_collections()
    for entry in config.get('collections', []):
        col = registry.get_new_collection()
        if entry.get('id'):
            col.set_id(entry['id'])
        else:
            col.set_new_id(seed=entry.get('title'))
        if entry.get('title'):
            col.set_title(entry['title'])
        if entry.get('description'):
            col.set_description(entry['description'])
        if entry.get('can_read'):
            col.set_can_read()
        if entry.get('can_write'):
            col.set_can_write()
        if entry.get('enabled'):
            col.set_enabled()
        if entry.get('hidden'):
            col.set_hidden()
        for media_type in entry.get('media_types',
                                    config['default_media_types']):
            col.add_media_type(media_type)
        col.set_date_added_to_current_time()
    logger.debug("Loaded %d collections from config", len(registry))
    return registry
