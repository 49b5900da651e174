from django.test import SimpleTestCase

from String_Analyser.utils import (
    analyze_string,
    character_frequency,
    compute_sha256,
    count_words,
    is_palindrome,
)

EMPTY_SHA256 = 'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
HELLO_SHA256 = '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'


class ComputeSha256Tests(SimpleTestCase):
    def test_known_digests(self):
        self.assertEqual(compute_sha256(''), EMPTY_SHA256)
        self.assertEqual(compute_sha256('hello'), HELLO_SHA256)

    def test_is_stable_across_calls(self):
        self.assertEqual(compute_sha256('racecar'), compute_sha256('racecar'))

    def test_case_and_whitespace_sensitive(self):
        self.assertNotEqual(compute_sha256('hello'), compute_sha256('Hello'))
        self.assertNotEqual(compute_sha256('hello'), compute_sha256('hello '))

    def test_lone_surrogate_is_hashable(self):
        self.assertEqual(len(compute_sha256('\ud800')), 64)


class AnalyzeStringTests(SimpleTestCase):
    def test_empty_string(self):
        props = analyze_string('')
        self.assertEqual(props.length, 0)
        self.assertTrue(props.is_palindrome)
        self.assertEqual(props.unique_characters, 0)
        self.assertEqual(props.word_count, 0)
        self.assertEqual(props.character_frequency_map, {})
        self.assertEqual(props.sha256_hash, EMPTY_SHA256)

    def test_racecar(self):
        props = analyze_string('racecar')
        self.assertEqual(props.length, 7)
        self.assertTrue(props.is_palindrome)
        self.assertEqual(props.unique_characters, 4)
        self.assertEqual(props.word_count, 1)
        self.assertEqual(props.character_frequency_map, {'r': 2, 'a': 2, 'c': 2, 'e': 1})

    def test_length_counts_code_points(self):
        # each emoji is two UTF-16 units and four UTF-8 bytes
        props = analyze_string('\U0001F600a\U0001F600')
        self.assertEqual(props.length, 3)
        self.assertTrue(props.is_palindrome)
        self.assertEqual(props.unique_characters, 2)
        self.assertEqual(props.character_frequency_map, {'\U0001F600': 2, 'a': 1})

    def test_sha256_hash_matches_identity(self):
        self.assertEqual(analyze_string('hello').sha256_hash, HELLO_SHA256)


class IsPalindromeTests(SimpleTestCase):
    def test_ignores_case_and_whitespace(self):
        self.assertTrue(is_palindrome('Never odd or even'))
        self.assertTrue(is_palindrome('Aa'))
        self.assertTrue(is_palindrome('ab\t\nba'))

    def test_repeated_phrase_is_not_palindrome(self):
        # normalizes to "amanaman"
        self.assertFalse(is_palindrome('A man a man'))

    def test_punctuation_is_not_ignored(self):
        self.assertFalse(is_palindrome('ab,a'))


class CountingTests(SimpleTestCase):
    def test_word_count(self):
        self.assertEqual(count_words('  hello   world  '), 2)
        self.assertEqual(count_words('one\ttwo\nthree'), 3)
        self.assertEqual(count_words('   '), 0)
        self.assertEqual(count_words(''), 0)

    def test_unique_characters_are_raw(self):
        props = analyze_string('Aa a')
        # 'A', 'a', ' ' counted separately; case and whitespace not normalized
        self.assertEqual(props.unique_characters, 3)
        self.assertTrue(props.is_palindrome)

    def test_character_frequency(self):
        self.assertEqual(character_frequency('a b a'), {'a': 2, ' ': 2, 'b': 1})


class PropertiesImmutabilityTests(SimpleTestCase):
    def test_frequency_map_is_read_only(self):
        props = analyze_string('noon')
        with self.assertRaises(TypeError):
            props.character_frequency_map['n'] = 99
        self.assertEqual(props.character_frequency_map, {'n': 2, 'o': 2})

    def test_to_dict_returns_plain_copy(self):
        props = analyze_string('noon')
        data = props.to_dict()
        data['character_frequency_map']['n'] = 99
        self.assertEqual(props.character_frequency_map['n'], 2)
