import random
import tempfile
import unittest
from pathlib import Path

from madlib.core.exceptions import DictionaryParseError, StoryFileNotFoundError
from madlib.core.models import StoryConfig
from madlib.data.dictionary import WordDictionary
from madlib.engine.generator import StoryGenerator

WORDS = '[{"word": "dog", "type": "noun"}, {"word": "quickly", "type": "adverb"}]'


class StoryGeneratorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        self.words = self.root / "words.json"
        self.template = self.root / "story.txt"
        self.output = self.root / "out.txt"
        self.words.write_text(WORDS, encoding="utf-8")

    def _config(self, **overrides) -> StoryConfig:
        values = dict(
            dictionary_path=self.words,
            template_path=self.template,
            output_path=self.output,
        )
        values.update(overrides)
        return StoryConfig(**values)

    def test_generates_story_file(self) -> None:
        self.template.write_text(
            "The [noun] ran [adverb].\nI will [verb] today.\nJust plain text.\n",
            encoding="utf-8",
        )
        result = StoryGenerator(self._config()).generate()

        self.assertEqual(
            self.output.read_text(encoding="utf-8").splitlines(),
            ["The dog ran quickly.", "I will XXX today.", "Just plain text."],
        )
        self.assertEqual(result.output_path, self.output)
        self.assertEqual(result.lines_written, 3)
        self.assertEqual(result.tokens_replaced, 3)
        self.assertEqual(result.placeholders_used, 1)
        self.assertEqual(result.missing_types, ("verb",))

    def test_line_count_is_preserved(self) -> None:
        self.template.write_bytes(b"one [noun]\r\n\r\nthree\rfour")
        result = StoryGenerator(self._config()).generate()

        lines = self.output.read_text(encoding="utf-8").splitlines()
        self.assertEqual(lines, ["one dog", "", "three", "four"])
        self.assertEqual(result.lines_written, 4)

    def test_empty_template_gives_empty_output(self) -> None:
        self.template.write_text("", encoding="utf-8")
        result = StoryGenerator(self._config()).generate()
        self.assertTrue(self.output.exists())
        self.assertEqual(self.output.read_text(encoding="utf-8"), "")
        self.assertEqual(result.lines_written, 0)

    def test_injected_dictionary_and_rng(self) -> None:
        self.template.write_text("[color] [color]\n", encoding="utf-8")
        dictionary = WordDictionary({"color": ["red", "green", "blue"]})
        generator = StoryGenerator(
            self._config(dictionary_path=self.root / "unused.json"),
            dictionary=dictionary,
            rng=random.Random(3),
        )
        generator.generate()

        expected_rng = random.Random(3)
        colors = dictionary.get("color")
        expected = " ".join(colors[expected_rng.randrange(3)] for _ in range(2))
        self.assertEqual(self.output.read_text(encoding="utf-8").splitlines(), [expected])

    def test_malformed_dictionary_writes_no_output(self) -> None:
        self.words.write_text('[{"word": "dog"}]', encoding="utf-8")
        self.template.write_text("[noun]\n", encoding="utf-8")
        with self.assertRaises(DictionaryParseError):
            StoryGenerator(self._config()).generate()
        self.assertFalse(self.output.exists())

    def test_missing_template_raises_not_found(self) -> None:
        with self.assertRaises(StoryFileNotFoundError) as ctx:
            StoryGenerator(self._config()).generate()
        self.assertEqual(ctx.exception.path, str(self.template))
        self.assertFalse(self.output.exists())

    def test_unwritable_output_raises_not_found(self) -> None:
        self.template.write_text("[noun]\n", encoding="utf-8")
        with self.assertRaises(StoryFileNotFoundError):
            StoryGenerator(self._config(output_path=self.root / "missing" / "out.txt")).generate()

    def test_paths_are_exposed(self) -> None:
        generator = StoryGenerator(self._config())
        self.assertEqual(generator.dictionary_path, self.words)
        self.assertEqual(generator.template_path, self.template)
        self.assertEqual(generator.output_path, self.output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
