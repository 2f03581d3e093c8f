"""
Tests for Name Generator
========================
Tests keyword parsing, the affix path, the industry pattern path and
industry loading.
"""

import random
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from settings import require_setting
from name_generator import (
    NameGenerator,
    NoKeywordsError,
    capitalize,
    parse_keywords,
    strip_vowels,
    double_last_letter,
    lexical_variants,
    get_industry,
    list_industries,
    load_industries,
)


@pytest.fixture
def gen():
    return NameGenerator(rng=random.Random(42))


class TestHelpers:
    """Tests for string helpers."""

    def test_capitalize_only_first_letter(self):
        assert capitalize("tech") == "Tech"
        assert capitalize("iPhone") == "IPhone"
        assert capitalize("cloudStack") == "CloudStack"
        assert capitalize("") == ""

    def test_parse_keywords_string(self):
        assert parse_keywords("Tech  Software") == ["tech", "software"]

    def test_parse_keywords_sequence_dedupes(self):
        assert parse_keywords(["Tech software", "TECH", " "]) == ["tech", "software"]

    def test_parse_keywords_empty(self):
        assert parse_keywords("") == []
        assert parse_keywords("   ") == []
        assert parse_keywords(None) == []

    def test_strip_vowels(self):
        assert strip_vowels("flicker") == "flckr"

    def test_double_last_letter(self):
        assert double_last_letter("fiver") == "fiverr"
        assert double_last_letter("fizz") == "fizz"
        assert double_last_letter("buzzz") == "buzz"

    def test_lexical_variants(self):
        assert lexical_variants("shop") == ["shp", "shopp", "shoply", "shopify", "shopio"]


class TestIndustries:
    """Tests for industry tables."""

    def test_seven_industries(self):
        assert set(list_industries()) == {
            "technology", "finance", "health", "education", "retail", "food", "creative",
        }

    def test_lookup_case_insensitive(self):
        assert get_industry("Finance").key == "finance"

    def test_unknown_and_empty(self):
        assert get_industry("mining") is None
        assert get_industry("") is None
        assert get_industry(None) is None

    def test_palettes_complete(self):
        for industry in load_industries().values():
            assert set(industry.palette) >= {"primary", "secondary", "accent"}

    def test_patterns_only_where_defined(self):
        assert get_industry("technology").naming is not None
        assert get_industry("finance").naming is not None
        assert get_industry("food").naming is None


class TestAffixPath:
    """Tests for NameGenerator.generate."""

    def test_keywords_capitalized_in_pool(self, gen):
        pool = gen.generate("Tech Software")
        assert "Tech" in pool
        assert "Software" in pool

    def test_generic_affixes(self, gen):
        pool = gen.generate("voltix")
        assert "ProVoltix" in pool
        assert "VoltixHub" in pool

    def test_industry_affixes(self, gen):
        pool = gen.generate("voltix", industry="finance")
        assert "FinVoltix" in pool
        assert "VoltixInvest" in pool
        assert "GlobalVoltix" in pool

    def test_tech_software_technology(self, gen):
        pool = gen.generate("tech software", industry="technology")
        assert "Tech" in pool
        assert "Software" in pool

        tech = get_industry("technology")
        prefixes = set(require_setting("name_generator.generic_prefixes"))
        prefixes |= set(tech.prefixes) | set(tech.modifiers)
        suffixes = set(require_setting("name_generator.generic_suffixes")) | set(tech.suffixes)
        for name in pool:
            assert any(
                name == root
                or (name.endswith(root) and name[:-len(root)] in prefixes)
                or (name.startswith(root) and name[len(root):] in suffixes)
                for root in ("Tech", "Software")
            ), name

    def test_unknown_industry_ignored(self, gen):
        assert gen.generate("voltix", industry="mining") == gen.generate("voltix")

    def test_pool_has_no_duplicates(self, gen):
        # "Tech" appears both as a generic suffix and a technology prefix
        pool = gen.generate("tech", industry="technology")
        assert len(pool) == len(set(pool))

    def test_count_samples_from_pool(self, gen):
        pool = gen.generate("coffee", industry="food")
        picks = gen.generate("coffee", industry="food", count=5)
        assert len(picks) == 5
        assert len(set(picks)) == 5
        assert set(picks) <= set(pool)

    def test_count_larger_than_pool(self, gen):
        pool = gen.generate("coffee")
        assert sorted(gen.generate("coffee", count=len(pool) + 10)) == sorted(pool)

    def test_seeded_output_is_reproducible(self):
        a = NameGenerator(rng=random.Random(7)).generate("coffee bean", "food", count=8)
        b = NameGenerator(rng=random.Random(7)).generate("coffee bean", "food", count=8)
        assert a == b

    def test_no_keywords(self, gen):
        with pytest.raises(NoKeywordsError, match="no keywords provided"):
            gen.generate("   ")
        with pytest.raises(NoKeywordsError):
            gen.generate([])


class TestPatternPath:
    """Tests for the industry pattern path."""

    def test_variants_always_present(self, gen):
        names = gen.industry_names("cloud", "technology")
        for name in ["Cloudly", "Cloudify", "Cloudio", "Cloudd"]:
            assert name in names

    def test_common_word_compounds(self, gen):
        names = gen.industry_names("cloud", "technology")
        assert "CloudStack" in names
        assert "StackCloud" in names
        assert "CloudCloud" not in names

    def test_length_bounds(self, gen):
        for name in gen.industry_names("cloud", "technology"):
            assert 4 <= len(name) <= 14
        assert "Cld" not in gen.industry_names("cloud", "technology")

    def test_industry_without_patterns(self, gen):
        assert gen.industry_names("coffee", "food") == []
        assert gen.industry_names("coffee", None) == []

    def test_pattern_fires_with_low_roll(self):
        class LowRng(random.Random):
            def random(self):
                return 0.0

        names = NameGenerator(rng=LowRng()).industry_names("pay", "finance")
        assert "FinPay" in names
        assert "PayCapital" in names
        assert "PayFund" in names

    def test_pattern_never_fires_with_high_roll(self):
        class HighRng(random.Random):
            def random(self):
                return 0.99

        names = NameGenerator(rng=HighRng()).industry_names("pay", "finance")
        assert "PayCapital" not in names

    def test_default_count_and_ranking(self, gen):
        names = gen.generate_industry_names("cloud", "technology")
        assert len(names) == 15
        distances = [abs(8 - len(n)) for n in names]
        assert distances == sorted(distances)

    def test_pair_combinations(self, gen):
        names = gen.generate_industry_names("coffee bean", "food", count=50)
        assert sorted(names) == ["BeanCoffee", "CoffeeBean"]

    def test_pairs_skip_length_filter(self, gen):
        names = gen.generate_industry_names("internationalization cloud", "technology", count=100)
        pairs = {"InternationalizationCloud", "CloudInternationalization"}
        assert set(names[-2:]) == pairs
        for name in names[:-2]:
            assert 4 <= len(name) <= 14

    def test_no_keywords(self, gen):
        with pytest.raises(NoKeywordsError):
            gen.generate_industry_names("", "technology")


class TestQuickFunction:
    """Tests for the module-level helper."""

    def test_generate_names(self):
        from name_generator import generate_names
        assert "Coffee" in generate_names("coffee", "food")
        assert len(generate_names("coffee", count=3)) == 3
