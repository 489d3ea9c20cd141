"""Feature-level fixtures for i18n tests."""

import datetime as dt

import pytest
import yaml

from i18nkit import LocaleData
from tests.factories.locale_data import make_i18n, make_locale_data


@pytest.fixture
def locale_data():
    """Raw data for a complete "en" locale."""
    return make_locale_data()


@pytest.fixture
def i18n(locale_data):
    """I18n instance bound to the complete "en" locale."""
    return make_i18n(locale_data)


@pytest.fixture
def frozen_data(locale_data):
    """LocaleData built from the complete "en" locale."""
    return LocaleData(locale_data)


@pytest.fixture
def new_year():
    """2026-01-01 13:05:09, a Thursday."""
    return dt.datetime(2026, 1, 1, 13, 5, 9)


@pytest.fixture
def locales_dir(tmp_path, locale_data):
    """Directory with en.yml and pt.yml locale files.

    Returns a directory structure like:
    - en.yml
    - pt.yml
    """
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(locale_data, f, sort_keys=False)

    pt = {
        "translations": {"hello": "mundo"},
        "formats": {"time": {"formats": {"default": "%H:%M:%S"}}},
    }
    with open(tmp_path / "pt.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(pt, f, sort_keys=False, allow_unicode=True)

    return tmp_path
