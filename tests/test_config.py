import json

import pytest

from stix4taxii.config import CONFIG_ENV, get_config, load_collections
from stix4taxii.resources import MEDIA_TYPE_STIX_V21


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({
        'collections': [
            {'id': '91a7b528-80eb-42ed-a74d-c6fbd5a26116',
             'title': 'High Value Indicators',
             'can_read': True,
             'enabled': True},
            {'title': 'Submissions',
             'can_write': True,
             'hidden': True,
             'media_types': ['application/json']},
        ]
    }))
    return str(path)


class TestConfig:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV, raising=False)
        config = get_config()
        assert config['spec_version'] == '2.1'
        assert config['default_media_types'] == [MEDIA_TYPE_STIX_V21]
        assert config['collections'] == []

    def test_defaults_not_shared(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV, raising=False)
        get_config()['default_media_types'].append('text/plain')
        assert get_config()['default_media_types'] == [MEDIA_TYPE_STIX_V21]

    def test_from_env(self, monkeypatch, config_file):
        monkeypatch.setenv(CONFIG_ENV, config_file)
        config = get_config()
        assert len(config['collections']) == 2
        assert config['spec_version'] == '2.1'

    def test_load_collections(self, config_file):
        reg = load_collections(get_config(config_file))
        assert len(reg) == 2
        first, second = reg[0], reg[1]
        assert first.id == '91a7b528-80eb-42ed-a74d-c6fbd5a26116'
        assert first.get_can_read() and first.enabled
        assert first.media_types == [MEDIA_TYPE_STIX_V21]
        assert second.id
        assert second.get_can_write() and second.hidden
        assert second.media_types == ['application/json']
        assert second.date_added
        assert 'date_added' not in second.to_dict()
