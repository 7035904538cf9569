import collections.abc
import json
import random
import uuid
from datetime import datetime

import stix2.utils
from slugify import slugify


def load_data(path):
    with open(path) as f:
        data = json.load(f)
    return data


def get_deterministic_uuid(prefix=None, seed=None):
    if prefix is None:
        prefix = ''
    if seed is None:
        stix_id = uuid.uuid4()
    else:
        # own generator, the module level one is left alone
        rng = random.Random(seed)
        a = "%032x" % rng.getrandbits(128)
        rd = a[:12] + '4' + a[13:16] + 'a' + a[17:]
        stix_id = uuid.UUID(rd)

    return "{}{}".format(prefix, stix_id)


def get_timestamp():
    # STIX timestamp string for the current UTC time
    return stix2.utils.format_datetime(stix2.utils.get_timestamp())


def format_timestamp(value):
    if isinstance(value, datetime):
        return stix2.utils.format_datetime(value)
    return value


def update(d, u):
    for k, v in u.items():
        if isinstance(v, collections.abc.Mapping):
            d[k] = update(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def to_open_vocab(label):
    """Normalise a free-text label into an open vocabulary value.

    Eg: ``"Suspicious Activity"`` becomes ``"suspicious-activity"``.
    """
    return slugify(label)
