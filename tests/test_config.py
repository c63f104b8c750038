"""Tests for environment configuration loading."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from contact_api.config import (  # noqa: E402
    DEFAULT_SITE_NAME,
    get_contact_config,
    load_contact_config,
    parse_origin_list,
)
from contact_api.exceptions import ConfigurationError  # noqa: E402


class TestParseOriginList:
    """Tests for parse_origin_list."""

    def test_splits_and_trims(self) -> None:
        assert parse_origin_list(' https://a.com , http://localhost:3000 ') == (
            'https://a.com',
            'http://localhost:3000',
        )

    def test_drops_blank_entries(self) -> None:
        assert parse_origin_list('https://a.com,, ,') == ('https://a.com',)

    def test_empty_string(self) -> None:
        assert parse_origin_list('') == ()


class TestLoadContactConfig:
    """Tests for load_contact_config."""

    def test_loads_required_and_optional_values(self, clean_config_env) -> None:
        clean_config_env.setenv('FROM_EMAIL', 'no-reply@mail.example.com')
        clean_config_env.setenv('TO_EMAIL', 'owner@example.com')
        clean_config_env.setenv('ALLOWED_ORIGINS', 'https://a.com,https://b.com')
        clean_config_env.setenv('SITE_NAME', 'My Profile')
        clean_config_env.setenv('SES_REGION', 'ap-northeast-1')

        config = load_contact_config()

        assert config.sender_email == 'no-reply@mail.example.com'
        assert config.owner_email == 'owner@example.com'
        assert config.allowed_origins == ('https://a.com', 'https://b.com')
        assert config.site_name == 'My Profile'
        assert config.ses_region == 'ap-northeast-1'

    def test_defaults(self, clean_config_env) -> None:
        clean_config_env.setenv('FROM_EMAIL', 'no-reply@mail.example.com')
        clean_config_env.setenv('TO_EMAIL', 'owner@example.com')

        config = load_contact_config()

        assert config.allowed_origins == ()
        assert config.site_name == DEFAULT_SITE_NAME
        assert config.ses_region is None

    @pytest.mark.parametrize('missing', ['FROM_EMAIL', 'TO_EMAIL'])
    def test_missing_required_value(self, clean_config_env, missing: str) -> None:
        clean_config_env.setenv('FROM_EMAIL', 'no-reply@mail.example.com')
        clean_config_env.setenv('TO_EMAIL', 'owner@example.com')
        clean_config_env.delenv(missing)

        with pytest.raises(ConfigurationError) as exc_info:
            load_contact_config()
        assert exc_info.value.config_name == missing

    def test_blank_required_value(self, clean_config_env) -> None:
        clean_config_env.setenv('FROM_EMAIL', '   ')
        clean_config_env.setenv('TO_EMAIL', 'owner@example.com')

        with pytest.raises(ConfigurationError):
            load_contact_config()

    def test_config_is_immutable(self, clean_config_env) -> None:
        clean_config_env.setenv('FROM_EMAIL', 'no-reply@mail.example.com')
        clean_config_env.setenv('TO_EMAIL', 'owner@example.com')

        config = load_contact_config()
        with pytest.raises(AttributeError):
            config.owner_email = 'attacker@example.com'


class TestGetContactConfig:
    """Tests for the cached accessor."""

    def test_loaded_once(self, clean_config_env) -> None:
        clean_config_env.setenv('FROM_EMAIL', 'no-reply@mail.example.com')
        clean_config_env.setenv('TO_EMAIL', 'owner@example.com')

        first = get_contact_config()
        clean_config_env.setenv('TO_EMAIL', 'changed@example.com')

        assert get_contact_config() is first
        assert get_contact_config().owner_email == 'owner@example.com'
