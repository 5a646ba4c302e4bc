"""Tests for configuration class selection."""
import pytest

from dashboard.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config_class,
)
from dashboard.sheets import SheetSettings, get_sheet_settings


def test_testing_config_selected(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'testing')
    assert get_config_class() is TestingConfig
    assert TestingConfig.TESTING is True


def test_development_is_default(monkeypatch):
    monkeypatch.delenv('APP_ENV', raising=False)
    assert get_config_class() is DevelopmentConfig
    assert DevelopmentConfig.DEBUG is True


def test_production_requires_env(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'production')
    monkeypatch.setenv('SPREADSHEET_ID', 'abc')
    monkeypatch.delenv('ADMIN_USER', raising=False)
    monkeypatch.delenv('ADMIN_PASS', raising=False)
    with pytest.raises(RuntimeError, match='ADMIN_USER, ADMIN_PASS'):
        get_config_class()


def test_production_with_env(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'production')
    for name in ('SPREADSHEET_ID', 'ADMIN_USER', 'ADMIN_PASS'):
        monkeypatch.setenv(name, 'x')
    assert get_config_class() is ProductionConfig


def test_sheet_settings_from_config(app):
    app.config.update(SHEET_NAME='Items', BUNDLES_SHEET_NAME='')
    with app.app_context():
        assert get_sheet_settings() == SheetSettings(item_sheet='Items', bundle_sheet='Bundles')


def test_main_entrypoint_builds_testing_app(monkeypatch):
    import importlib
    import sys

    monkeypatch.setenv('APP_ENV', 'testing')
    sys.modules.pop('main', None)
    main = importlib.import_module('main')
    assert main.app.config['TESTING'] is True
    assert main.app.config['SPREADSHEET_ID'] == 'test-spreadsheet'
