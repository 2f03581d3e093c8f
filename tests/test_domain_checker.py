"""
Tests for Domain Checker
========================
Tests simulated availability, registrar links and affiliate ids.
"""

import asyncio
import random
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from domain_checker import DomainChecker, DomainResult, CheckStatus


def make_checker(**kwargs):
    kwargs.setdefault("rng", random.Random(1))
    kwargs.setdefault("delay_seconds", 0)
    return DomainChecker(**kwargs)


class TestDomainCheck:
    """Tests for DomainChecker.check."""

    def test_default_suffixes(self):
        results = asyncio.run(make_checker().check("Voltix"))
        assert [r.domain for r in results] == [
            "voltix.com", "voltix.io", "voltix.co", "voltix.app",
        ]

    def test_name_is_cleaned(self):
        results = asyncio.run(make_checker().check("Blue Sky & Co!", [".com"]))
        assert results[0].domain == "blueskyco.com"

    def test_custom_suffixes(self):
        results = asyncio.run(make_checker().check("voltix", [".net", ".ai"]))
        assert [r.domain for r in results] == ["voltix.net", "voltix.ai"]

    def test_empty_label(self):
        assert asyncio.run(make_checker().check("!!!")) == []

    def test_always_available(self):
        results = asyncio.run(make_checker(available_probability=1.0).check("voltix"))
        assert all(r.available for r in results)
        assert all(r.status == CheckStatus.AVAILABLE for r in results)

    def test_never_available(self):
        results = asyncio.run(make_checker(available_probability=0.0).check("voltix"))
        assert not any(r.available for r in results)
        assert all(r.status == CheckStatus.TAKEN for r in results)

    def test_seeded_reproducible(self):
        a = asyncio.run(make_checker(rng=random.Random(5)).check("voltix"))
        b = asyncio.run(make_checker(rng=random.Random(5)).check("voltix"))
        assert [r.available for r in a] == [r.available for r in b]

    def test_batch(self):
        batch = asyncio.run(make_checker().check_batch(["Voltix", "Lumina"], [".com"]))
        assert list(batch) == ["Voltix", "Lumina"]
        assert batch["Lumina"][0].domain == "lumina.com"


class TestRegistrarLinks:
    """Tests for registrar search links."""

    def test_links_without_affiliates(self):
        links = make_checker().registrar_links("voltix.com")
        assert [l.name for l in links] == ["GoDaddy", "Namecheap"]
        assert links[0].url.endswith("domainToCheck=voltix.com")
        assert links[1].url.endswith("domain=voltix.com")
        assert all("aid=" not in l.url for l in links)
        assert links[0].price_range

    def test_affiliate_id_appended(self):
        checker = make_checker(affiliate_ids={"godaddy": "gd-123", "namecheap": None})
        godaddy, namecheap = checker.registrar_links("voltix.com")
        assert godaddy.url.endswith("voltix.com&aid=gd-123")
        assert "aid=" not in namecheap.url

    def test_every_result_has_links(self):
        results = asyncio.run(make_checker().check("voltix"))
        assert all(len(r.registrars) == 2 for r in results)


class TestDomainResult:
    """Tests for result serialization."""

    def test_to_dict(self):
        result = DomainResult(domain="voltix.com", status=CheckStatus.TAKEN)
        data = result.to_dict()
        assert data == {
            "domain": "voltix.com",
            "available": False,
            "status": "taken",
            "registrars": [],
        }

    def test_error_included(self):
        result = DomainResult(domain="voltix.com", status=CheckStatus.ERROR, error="boom")
        assert result.to_dict()["error"] == "boom"
