"""Shared fixtures for caseinsensitivestr tests."""

import pytest

from caseinsensitivestr import folding, storage
from caseinsensitivestr.cistr import CaseInsensitiveString


@pytest.fixture(autouse=True)
def default_mode(monkeypatch):
    """Run every test with Unicode folding and str storage unless it asks otherwise."""
    monkeypatch.setattr(CaseInsensitiveString, "_fold", staticmethod(folding.unicode_fold))
    monkeypatch.setattr(CaseInsensitiveString, "_storage", storage.StrStorage)


@pytest.fixture
def ascii_mode(monkeypatch):
    """Switch CaseInsensitiveString to ASCII-only folding."""
    monkeypatch.setattr(CaseInsensitiveString, "_fold", staticmethod(folding.ascii_fold))


@pytest.fixture
def compact_mode(monkeypatch):
    """Switch CaseInsensitiveString to the compact UTF-8 storage backend."""
    monkeypatch.setattr(CaseInsensitiveString, "_storage", storage.CompactStorage)
