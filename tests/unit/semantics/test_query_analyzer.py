"""Tests for query analysis."""

import pytest

from glowkit.core.caching import stable_hash
from glowkit.core.effects import EffectMoodCategory, EffectVibe, EnergyLevel, MotionType
from glowkit.core.semantics import QueryAnalyzer, analyze_query, occasion_for, query_hash


@pytest.fixture(scope="module")
def analyzer() -> QueryAnalyzer:
    return QueryAnalyzer()


class TestThemeExtraction:
    """Test extract_theme()."""

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("let's have a wedding party!", "wedding"),
            ("Chiefs game day", "chiefs"),
            ("make it look like the ocean", "ocean"),
            ("4th of July bash", "4thofjuly"),
            ("happy Christmas and halloween", "christmas"),
        ],
    )
    def test_theme(self, analyzer, query, expected):
        """Test token and compound theme detection."""
        assert analyzer.extract_theme(query) == expected

    def test_first_token_wins_over_list_order(self, analyzer):
        """Test a later-listed keyword appearing first in the query wins."""
        assert analyzer.extract_theme("summer wedding") == "summer"

    @pytest.mark.parametrize("query", ["", "   ", "xyz", "let's make it"])
    def test_no_theme(self, analyzer, query):
        """Test empty, filler-only and unknown queries have no theme."""
        assert analyzer.extract_theme(query) is None


class TestContextExtraction:
    """Test extract_context()."""

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("wedding party", "party"),
            ("fancy gala dinner", "elegant"),
            ("date night", "romantic"),
            ("festive lights", "celebration"),
            ("something simple", "simple"),
            ("a fun but elegant evening", "party"),
            ("blue", None),
        ],
    )
    def test_context(self, analyzer, query, expected):
        """Test the ordered context table, first rule wins."""
        assert analyzer.extract_context(query) == expected


class TestAttributeExtraction:
    """Test mood, vibe, energy and motion rule tables."""

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("spooky halloween", EffectMoodCategory.MYSTERIOUS),
            ("romantic evening", EffectMoodCategory.ROMANTIC),
            ("wedding", EffectMoodCategory.ELEGANT),
            ("christmas", EffectMoodCategory.FESTIVE),
            ("beach sunset", EffectMoodCategory.NATURAL),
            ("xyz", None),
        ],
    )
    def test_mood(self, analyzer, query, expected):
        assert analyzer.extract_mood(query) == expected

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("spooky", EffectVibe.SPOOKY),
            ("peaceful", EffectVibe.SERENE),
            ("zen garden", EffectVibe.TRANQUIL),
            ("xyz", None),
        ],
    )
    def test_vibe(self, analyzer, query, expected):
        assert analyzer.extract_vibe(query) == expected

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("crazy rave", EnergyLevel.VERY_HIGH),
            ("bedtime", EnergyLevel.VERY_LOW),
            ("dance party", EnergyLevel.HIGH),
            ("slow and calm", EnergyLevel.LOW),
            ("xyz", None),
        ],
    )
    def test_energy(self, analyzer, query, expected):
        assert analyzer.extract_energy(query) == expected

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("chasing lights", MotionType.CHASING),
            ("twinkling stars", MotionType.TWINKLING),
            ("gentle waves", MotionType.FLOWING),
            ("breathing", MotionType.PULSING),
            ("fireworks", MotionType.EXPLOSIVE),
            ("steady glow", MotionType.STATIC),
            ("xyz", None),
        ],
    )
    def test_motion(self, analyzer, query, expected):
        assert analyzer.extract_motion(query) == expected


class TestColorExtraction:
    """Test extract_colors() and detect_color_override()."""

    def test_named_colors_in_order(self, analyzer):
        """Test named colors are returned in order of appearance."""
        colors, explicit = analyzer.extract_colors("Red and Green")
        assert colors == [(255, 0, 0), (0, 255, 0)]
        assert explicit is True

    def test_multi_word_names_claim_their_span(self, analyzer):
        """Test 'warm white' does not also yield 'white'."""
        colors, _ = analyzer.extract_colors("blue and warm white")
        assert colors == [(0, 0, 255), (255, 244, 224)]

    def test_repeated_names_deduped(self, analyzer):
        """Test repeated names appear once."""
        colors, _ = analyzer.extract_colors("red, white and red")
        assert colors == [(255, 0, 0), (255, 255, 255)]

    def test_themed_fallback(self, analyzer):
        """Test occasion keywords fall back to a themed palette."""
        colors, explicit = analyzer.extract_colors("christmas")
        assert colors == [(255, 0, 0), (0, 255, 0), (255, 255, 255)]
        assert explicit is False

    def test_named_colors_beat_themes(self, analyzer):
        """Test explicit colors win over the themed fallback."""
        colors, explicit = analyzer.extract_colors("christmas in blue")
        assert colors == [(0, 0, 255)]
        assert explicit is True

    def test_team_fallback(self, analyzer):
        """Test a team theme falls back to the team's colors."""
        colors, explicit = analyzer.extract_colors("chiefs game day")
        assert colors == [(227, 24, 55), (255, 184, 28)]
        assert explicit is False

    def test_no_colors(self, analyzer):
        assert analyzer.extract_colors("xyz") == ([], False)

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("rainbow party", True),
            ("make it multicolor", True),
            ("multi-colored lights", True),
            ("pride month", True),
            ("something colorful", True),
            ("red", False),
        ],
    )
    def test_color_override(self, analyzer, query, expected):
        assert analyzer.detect_color_override(query) is expected


class TestAnalyze:
    """Test analyze() and the query hash."""

    def test_full_analysis(self, analyzer):
        """Test every attribute is populated."""
        a = analyzer.analyze("let's have a wedding party!")
        assert a.query == "let's have a wedding party!"
        assert a.theme == "wedding"
        assert a.context == "party"
        assert a.mood == EffectMoodCategory.ELEGANT
        assert a.energy_level == EnergyLevel.HIGH
        assert a.keywords == ("wedding", "party")
        assert a.colors_explicit is False
        assert a.wants_color_override is False
        assert a.query_hash == stable_hash("wedding", "party")

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("it's christmas", ["christmas"]),
            ("--- christmas !!", ["christmas"]),
            ("rock-n-roll 4th", ["rock-n-roll", "4th"]),
        ],
    )
    def test_keywords_drop_fragments(self, analyzer, query, expected):
        """Test contraction leftovers and symbol-only tokens are not keywords."""
        assert analyzer.keywords(query) == expected

    def test_hash_ignores_filler_and_punctuation(self):
        """Test equivalent phrasings share a hash."""
        assert query_hash("let's have a wedding party!") == query_hash("wedding party")

    def test_hash_depends_on_context(self):
        """Test a different context gives a different hash."""
        assert query_hash("wedding") != query_hash("wedding party")

    def test_hash_ignores_mood_and_color(self):
        """Test attributes outside theme and context do not change the hash."""
        assert query_hash("red christmas party") == query_hash("christmas party")

    def test_empty_query(self):
        """Test an empty query analyzes to the generic/neutral hash."""
        a = analyze_query("   ")
        assert a.is_empty
        assert a.theme is None
        assert a.query_hash == stable_hash(None, None)

    def test_pure(self, analyzer):
        """Test repeated analysis is identical."""
        assert analyzer.analyze("spooky orange halloween") == analyzer.analyze("spooky orange halloween")

    @pytest.mark.parametrize(
        ("theme", "context", "expected"),
        [
            ("xmas", None, "christmas"),
            ("4thofjuly", "party", "4th-of-july"),
            ("chiefs", None, "sports-team"),
            ("sunrise", "party", "party"),
            (None, "simple", "everyday"),
            (None, "elegant", None),
            (None, None, None),
        ],
    )
    def test_occasion(self, theme, context, expected):
        """Test theme occasions take priority over context occasions."""
        assert occasion_for(theme, context) == expected
