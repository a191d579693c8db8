import tempfile
import unittest
from pathlib import Path

from wordhunt.core.exceptions import WordListLoadError
from wordhunt.data.normalization import clean_word
from wordhunt.data.words import DEFAULT_WORDS, load_word_list, prepare_word_list


class NormalizationTests(unittest.TestCase):
    def test_clean_word_strips_accents_and_symbols(self) -> None:
        self.assertEqual(clean_word("café"), "CAFE")
        self.assertEqual(clean_word("ăâîșț"), "AAIST")
        self.assertEqual(clean_word("e-mail 2"), "EMAIL")
        self.assertEqual(clean_word(""), "")


class PrepareWordListTests(unittest.TestCase):
    def test_deduplicates_preserving_first_occurrence(self) -> None:
        self.assertEqual(prepare_word_list(["dog", "Cat", "DOG", "", "!!"]), ["DOG", "CAT"])

    def test_drops_words_longer_than_limit(self) -> None:
        self.assertEqual(prepare_word_list(["ELEPHANT", "OX"], max_length=4), ["OX"])

    def test_default_words_are_clean(self) -> None:
        self.assertEqual(list(DEFAULT_WORDS), prepare_word_list(DEFAULT_WORDS))


class LoadWordListTests(unittest.TestCase):
    def test_text_file_skips_comments_and_blanks(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# animals\nlion\n\n  tiger  \n", encoding="utf-8")
            self.assertEqual(load_word_list(path), ["lion", "tiger"])

    def test_csv_uses_word_column(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.csv"
            path.write_text("id,word\n1,lion\n2,tiger\n", encoding="utf-8")
            self.assertEqual(load_word_list(path), ["lion", "tiger"])

    def test_tsv_falls_back_to_first_column(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.tsv"
            path.write_text("entry\tnote\nlion\tbig\ntiger\tstriped\n", encoding="utf-8")
            self.assertEqual(load_word_list(path), ["lion", "tiger"])

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(WordListLoadError):
            load_word_list(Path("does/not/exist.txt"))

    def test_directory_path_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(WordListLoadError):
                load_word_list(Path(tmpdir))

    def test_invalid_utf8_text_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_bytes(b"lion\n\xff\xfe\n")
            with self.assertRaises(WordListLoadError):
                load_word_list(path)

    def test_invalid_utf8_table_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.csv"
            path.write_bytes(b"word\nli\xffon\n")
            with self.assertRaises(WordListLoadError):
                load_word_list(path)

    def test_empty_table_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "empty.csv"
            path.write_text("", encoding="utf-8")
            with self.assertRaises(WordListLoadError):
                load_word_list(path)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
