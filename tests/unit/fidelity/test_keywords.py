from spec_fidelity.fidelity.keywords import KeywordExtractor


class TestKeywordExtractor:
    def test_lowercases_and_strips_punctuation(self) -> None:
        extractor = KeywordExtractor(stop_words=[])

        assert extractor.extract("Login, PASSWORD! (email)") == [
            "login",
            "password",
            "email",
        ]

    def test_drops_short_words_and_stop_words(self) -> None:
        extractor = KeywordExtractor(stop_words=["there"])

        assert extractor.extract("There is a cart page") == ["cart", "page"]

    def test_deduplicates_preserving_first_occurrence(self) -> None:
        extractor = KeywordExtractor(stop_words=[])

        assert extractor.extract("order cart order items cart") == [
            "order",
            "cart",
            "items",
        ]

    def test_keeps_slovak_diacritics(self) -> None:
        extractor = KeywordExtractor(stop_words=["alebo"])

        assert extractor.extract("Používateľ zadá heslo alebo číslo") == [
            "používateľ",
            "zadá",
            "heslo",
            "číslo",
        ]

    def test_custom_min_length(self) -> None:
        extractor = KeywordExtractor(stop_words=[], min_length=6)

        assert extractor.extract("open the settings screen") == [
            "settings",
            "screen",
        ]

    def test_empty_text(self) -> None:
        extractor = KeywordExtractor(stop_words=[])

        assert extractor.extract("") == []
        assert extractor.extract("   \n\t ") == []
