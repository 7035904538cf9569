import random

from stix4taxii.utils import (
    get_deterministic_uuid,
    get_timestamp,
    to_open_vocab,
    update
)


class TestUtils:

    def test_deterministic_uuid(self):
        a = get_deterministic_uuid(prefix='grouping--', seed='g4i commit')
        b = get_deterministic_uuid(prefix='grouping--', seed='g4i commit')
        assert a == b
        assert a.startswith('grouping--')

    def test_random_uuid(self):
        assert get_deterministic_uuid() != get_deterministic_uuid()

    def test_timestamp(self):
        assert get_timestamp().endswith('Z')

    def test_open_vocab(self):
        assert to_open_vocab('IT Consulting & Other Services') == \
            'it-consulting-other-services'

    def test_update_nested(self):
        d = {'a': {'b': 1, 'c': 2}, 'd': [1]}
        update(d, {'a': {'b': 3}, 'd': [2]})
        assert d == {'a': {'b': 3, 'c': 2}, 'd': [2]}

    def test_seeded_uuid_leaves_global_random_alone(self):
        random.seed(42)
        expected = random.random()
        random.seed(42)
        get_deterministic_uuid(prefix='x--', seed='Submissions')
        assert random.random() == expected
