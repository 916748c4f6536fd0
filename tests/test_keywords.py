"""
Unit tests for keyword extraction.
"""

from channel_analyzer.models.analysis import VideoRecord
from channel_analyzer.utils.keywords import extract_keywords, keyword_frequencies, tokenize


class TestTokenize:
    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("Hello, WORLD!!") == ["hello", "world"]

    def test_drops_short_tokens(self):
        assert tokenize("a an the cat") == ["the", "cat"]

    def test_keeps_hangul(self):
        assert tokenize("여행 브이로그 추천!") == ["브이로그"]
        assert tokenize("맛집투어 브이로그") == ["맛집투어", "브이로그"]

    def test_strips_other_scripts_by_default(self):
        # Accented Latin letters are outside ASCII \w and the Hangul range
        assert tokenize("café") == ["caf"]

    def test_custom_script_range(self):
        assert tokenize("привет мир", script_ranges="а-яё") == ["привет", "мир"]
        assert tokenize("привет мир") == []


class TestExtractKeywords:
    def test_empty_list(self):
        assert extract_keywords([]) == []

    def test_orders_by_frequency(self):
        videos = [
            VideoRecord(title="python tips", description="python basics"),
            VideoRecord(title="python tricks", description="more tips"),
        ]
        assert extract_keywords(videos)[:2] == ["python", "tips"]

    def test_ties_keep_first_occurrence_order(self):
        videos = [VideoRecord(title="zeta alpha mango")]
        assert extract_keywords(videos) == ["zeta", "alpha", "mango"]

    def test_includes_transcript_text(self):
        videos = [VideoRecord(title="one", transcript="hidden hidden words")]
        assert extract_keywords(videos)[0] == "hidden"

    def test_at_most_twenty_unique_long_words(self):
        words = " ".join(f"word{i:02d}" for i in range(40))
        videos = [VideoRecord(title=words, description=words)]
        result = extract_keywords(videos)
        assert len(result) == 20
        assert len(set(result)) == 20
        assert all(len(word) > 2 for word in result)

    def test_limit(self):
        videos = [VideoRecord(title="alpha bravo charlie delta")]
        assert extract_keywords(videos, limit=2) == ["alpha", "bravo"]


class TestKeywordFrequencies:
    def test_empty_text(self):
        assert keyword_frequencies("") == []

    def test_counts_and_percentages(self):
        result = keyword_frequencies("apple apple banana cherry")
        assert result[0] == {"word": "apple", "count": 2, "percentage": "50.00"}
        assert result[1]["percentage"] == "25.00"
