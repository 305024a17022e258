import pytest

from data_designer_readability.word_list import (
    DEFAULT_WORD_LIST,
    DEFAULT_WORD_LIST_PATH,
    ReferenceWordList,
    WordListError,
    load_word_list,
)


class TestDefaultWordList:
    def test_loaded_at_import(self):
        assert len(DEFAULT_WORD_LIST) > 2500

    def test_contains_familiar_words(self):
        for word in ("the", "cat", "dog", "house", "mother", "school", "don't"):
            assert word in DEFAULT_WORD_LIST

    def test_excludes_unfamiliar_words(self):
        for word in ("institutional", "methodology", "paradigm"):
            assert word not in DEFAULT_WORD_LIST

    def test_entries_are_lowercase(self):
        assert all(word == word.lower() for word in DEFAULT_WORD_LIST)

    def test_reload_is_equal(self):
        assert load_word_list(DEFAULT_WORD_LIST_PATH) == DEFAULT_WORD_LIST


class TestReferenceWordList:
    def test_from_words_deduplicates(self):
        word_list = ReferenceWordList.from_words(["cat", "dog", "cat"])
        assert len(word_list) == 2
        assert sorted(word_list) == ["cat", "dog"]

    def test_is_immutable(self):
        word_list = ReferenceWordList.from_words(["cat"])
        with pytest.raises(AttributeError):
            word_list.words = frozenset({"dog"})

    @pytest.mark.parametrize("words", [[], ["Cat"], ["two words"], [""], [" cat"]])
    def test_rejects_malformed_entries(self, words):
        with pytest.raises(WordListError):
            ReferenceWordList.from_words(words)


class TestLoadWordList:
    def test_skips_blank_lines_and_comments(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# familiar words\ncat\n\n  dog  \n", encoding="utf-8")
        assert load_word_list(str(path)).words == frozenset({"cat", "dog"})

    def test_missing_file(self, tmp_path):
        with pytest.raises(WordListError, match="Could not read"):
            load_word_list(str(tmp_path / "missing.txt"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n# nothing here\n", encoding="utf-8")
        with pytest.raises(WordListError, match="empty"):
            load_word_list(str(path))
