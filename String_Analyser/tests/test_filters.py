from django.test import SimpleTestCase
from django.http import QueryDict

from String_Analyser.exceptions import InvalidFilter
from String_Analyser.filters import (
    StringRecordFilter,
    evaluate,
    paginate,
    parse_filters,
    parse_page,
)
from String_Analyser.persistence import InMemoryPersistence
from String_Analyser.store import StringStore

VALUES = ['abc', 'racecar', 'a b', 'noon', 'hello world', 'Zz']


class EvaluateTests(SimpleTestCase):
    def setUp(self):
        self.store = StringStore(InMemoryPersistence())
        for value in VALUES:
            self.store.create(value)
        self.records = self.store.list()

    def values(self, spec):
        return [r.value for r in evaluate(self.records, spec)]

    def test_empty_filter_matches_everything(self):
        self.assertEqual(self.values(StringRecordFilter()), VALUES)

    def test_exact_length_window(self):
        self.assertEqual(self.values(StringRecordFilter(min_length=3, max_length=3)), ['abc', 'a b'])

    def test_palindrome(self):
        self.assertEqual(self.values(StringRecordFilter(is_palindrome=True)), ['racecar', 'noon', 'Zz'])
        self.assertEqual(self.values(StringRecordFilter(is_palindrome=False)), ['abc', 'a b', 'hello world'])

    def test_word_count(self):
        self.assertEqual(self.values(StringRecordFilter(word_count=2)), ['a b', 'hello world'])

    def test_contains_character_is_case_sensitive(self):
        self.assertEqual(self.values(StringRecordFilter(contains_character='Z')), ['Zz'])
        self.assertEqual(self.values(StringRecordFilter(contains_character='z')), ['Zz'])
        self.assertEqual(self.values(StringRecordFilter(contains_character='A')), [])

    def test_filters_combine_with_and(self):
        spec = StringRecordFilter(is_palindrome=True, min_length=5, contains_character='e')
        self.assertEqual(self.values(spec), ['racecar'])

    def test_as_dict_only_includes_set_fields(self):
        self.assertEqual(StringRecordFilter(min_length=0).as_dict(), {'min_length': 0})
        self.assertEqual(StringRecordFilter().as_dict(), {})


class PaginateTests(SimpleTestCase):
    def test_slices_and_reports_total(self):
        result = paginate(list('abcde'), offset=1, limit=2)
        self.assertEqual(result.page, ['b', 'c'])
        self.assertEqual(result.total, 5)

    def test_out_of_range_is_empty(self):
        result = paginate(list('abc'), offset=1000, limit=10)
        self.assertEqual(result.page, [])
        self.assertEqual(result.total, 3)

    def test_zero_limit(self):
        self.assertEqual(paginate(list('abc'), offset=0, limit=0).page, [])


class ParseFiltersTests(SimpleTestCase):
    def test_parses_query_params(self):
        params = QueryDict('is_palindrome=true&min_length=2&max_length=9&word_count=1&contains_character=a')
        spec = parse_filters(params)
        self.assertEqual(spec, StringRecordFilter(
            is_palindrome=True, min_length=2, max_length=9, word_count=1, contains_character='a'))

    def test_absent_boolean_does_not_filter(self):
        self.assertEqual(parse_filters(QueryDict('min_length=2')), StringRecordFilter(min_length=2))

    def test_error_names_the_parameter(self):
        with self.assertRaisesMessage(InvalidFilter, 'contains_character'):
            parse_filters({'contains_character': 'ab'})

    def test_boolean_spellings(self):
        self.assertFalse(parse_filters({'is_palindrome': 'False'}).is_palindrome)
        self.assertTrue(parse_filters({'is_palindrome': '1'}).is_palindrome)
        self.assertTrue(parse_filters({'is_palindrome': True}).is_palindrome)

    def test_unknown_keys_are_ignored(self):
        self.assertEqual(parse_filters({'colour': 'blue', 'sort': 'x'}), StringRecordFilter())

    def test_rejects_non_integers(self):
        for name in ('min_length', 'max_length', 'word_count'):
            for raw in ('abc', '1.5', '', '1_0', '3.0'):
                with self.assertRaises(InvalidFilter):
                    parse_filters({name: raw})

    def test_rejects_negative_integers(self):
        with self.assertRaises(InvalidFilter):
            parse_filters({'min_length': '-1'})

    def test_rejects_bad_boolean(self):
        with self.assertRaises(InvalidFilter):
            parse_filters({'is_palindrome': 'maybe'})

    def test_contains_character_must_be_one_code_point(self):
        with self.assertRaises(InvalidFilter):
            parse_filters({'contains_character': 'ab'})
        with self.assertRaises(InvalidFilter):
            parse_filters({'contains_character': ''})
        self.assertEqual(parse_filters({'contains_character': '\U0001F600'}).contains_character, '\U0001F600')


class ParsePageTests(SimpleTestCase):
    def test_defaults(self):
        self.assertEqual(parse_page({}), (0, 100))

    def test_explicit(self):
        self.assertEqual(parse_page({'offset': '5', 'limit': '10'}), (5, 10))

    def test_invalid(self):
        with self.assertRaises(InvalidFilter):
            parse_page({'limit': 'ten'})
        with self.assertRaises(InvalidFilter):
            parse_page({'offset': '1_0'})

    def test_negative_bounds_clamp_to_zero(self):
        self.assertEqual(parse_page({'offset': '-3', 'limit': '-1'}), (0, 0))
        self.assertEqual(paginate(list('abc'), *parse_page({'offset': '-3'})).page, list('abc'))
