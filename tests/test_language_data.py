"""Tests for multilingual block parsing."""

import pytest

from wordshk_parser import Language, LanguageData, ParseError, parse_language_data


class TestParseLanguageData:

    def test_repeated_language_is_not_merged(self):
        data = parse_language_data("eng:hello\nyue:你好\neng:world")
        assert data.to_dict() == {"eng": ["hello", "world"], "yue": ["你好"]}
        assert list(data) == [Language.ENGLISH, Language.CANTONESE]

    def test_continuation_lines(self):
        data = parse_language_data("eng:to have dim sum\n  at a restaurant  \nyue:飲茶")
        assert data["eng"] == ("to have dim sum\nat a restaurant",)
        assert data["yue"] == ("飲茶",)

    def test_content_is_trimmed(self):
        data = parse_language_data("yue:  你好  ")
        assert data[Language.CANTONESE] == ("你好",)

    def test_only_first_colon_splits(self):
        data = parse_language_data("eng:ratio 3:1")
        assert data["eng"] == ("ratio 3:1",)

    def test_full_width_colon_is_continuation(self):
        data = parse_language_data("yue:佢話\n佢講：「好」")
        assert data["yue"] == ("佢話\n佢講：「好」",)

    def test_classifier_code(self):
        data = parse_language_data("量詞:隻")
        assert data["量詞"] == ("隻",)
        assert Language.CLASSIFIER in data

    def test_empty_segments_dropped(self):
        data = parse_language_data("eng:\n\nyue:你好")
        assert data.to_dict() == {"yue": ["你好"]}

    def test_leading_lines_ignored(self):
        data = parse_language_data("\n\nyue:你好\n")
        assert data.to_dict() == {"yue": ["你好"]}

    def test_empty_block(self):
        data = parse_language_data("")
        assert len(data) == 0
        assert data == LanguageData()

    def test_unknown_language_fails(self):
        with pytest.raises(ParseError, match="Invalid language: xyz"):
            parse_language_data("yue:你好\nxyz:hello")

    def test_colon_in_continuation_line_fails(self):
        with pytest.raises(ParseError, match="Invalid language"):
            parse_language_data("eng:a drink\nNote: served hot")


class TestLanguageData:

    def test_lookup_by_member_or_code(self):
        data = LanguageData.from_pairs([(Language.ENGLISH, "hi")])
        assert data[Language.ENGLISH] == data["eng"] == ("hi",)

    def test_missing_key(self):
        data = LanguageData.from_pairs([(Language.ENGLISH, "hi")])
        with pytest.raises(KeyError):
            data["yue"]
        assert "yue" not in data
        assert data.get("nope") is None

    def test_immutable_and_hashable(self):
        data = LanguageData.from_pairs([(Language.ENGLISH, "hi")])
        with pytest.raises(AttributeError):
            data.entries = ()
        assert hash(data) == hash(LanguageData.from_pairs([(Language.ENGLISH, "hi")]))
