"""Tests for environment-driven settings."""

import pytest

from storefront import config


def test_page_size_from_environment(monkeypatch):
    monkeypatch.setenv("STOREFRONT_PAGE_SIZE", "12")
    assert config._positive_int("STOREFRONT_PAGE_SIZE", "6") == 12


def test_page_size_default(monkeypatch):
    monkeypatch.delenv("STOREFRONT_PAGE_SIZE", raising=False)
    assert config._positive_int("STOREFRONT_PAGE_SIZE", "6") == 6


@pytest.mark.parametrize("value", ["0", "-3"])
def test_page_size_below_one_is_rejected(monkeypatch, value):
    monkeypatch.setenv("STOREFRONT_PAGE_SIZE", value)
    with pytest.raises(ValueError, match="STOREFRONT_PAGE_SIZE"):
        config._positive_int("STOREFRONT_PAGE_SIZE", "6")
