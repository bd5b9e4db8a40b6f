"""
Test cases for search and category filtering.
Covers the AND semantics of query and category, case folding and literal substring matching.
"""

import pytest

from catalog import (
    ALL_CATEGORIES,
    CATEGORIES,
    FilterState,
    ToolCatalog,
    apply_filter,
    matches_query,
    search
)


def names(tools):
    return [tool.name for tool in tools]


class TestSearch:
    def test_empty_query_all_categories_returns_everything(self, catalog):
        assert search(catalog, '', ALL_CATEGORIES) == catalog.all()

    def test_default_category_is_all(self, catalog):
        assert search(catalog, '') == catalog.all()

    def test_category_only_filter(self, catalog):
        result = search(catalog, '', 'Security')
        assert result == catalog.by_category('Security')
        assert all(tool.category == 'Security' for tool in result)

    @pytest.mark.parametrize('category', CATEGORIES)
    def test_category_filter_matches_by_category(self, catalog, category):
        assert search(catalog, '', category) == catalog.by_category(category)

    def test_query_only_jwt(self, catalog):
        assert names(search(catalog, 'jwt', ALL_CATEGORIES)) == ['JWT Decoder & Creator']

    def test_query_matches_name_description_or_tag(self, catalog):
        result = names(search(catalog, 'json', ALL_CATEGORIES))
        # name
        assert 'JSON Formatter' in result
        assert 'YAML ⇄ JSON Converter' in result
        # description only
        assert 'Code Minifier/Prettifier' in result
        assert 'Regex Tester' not in result

    def test_query_matches_tag_substring(self, catalog):
        # 'checksum' only appears as a tag of the hash tool
        assert names(search(catalog, 'checks', ALL_CATEGORIES)) == ['Hash Generator & Verifier']

    def test_and_semantics(self, catalog):
        result = search(catalog, 'generate', 'Security')
        assert 'Password Generator' in names(result)
        assert 'UUID Generator' not in names(result)
        assert all(tool.category == 'Security' for tool in result)

    def test_and_semantics_other_category(self, catalog):
        result = names(search(catalog, 'generate', 'Generators'))
        assert 'UUID Generator' in result
        assert 'Password Generator' not in result

    def test_case_insensitive(self, catalog):
        assert search(catalog, 'JSON', ALL_CATEGORIES) == search(catalog, 'json', ALL_CATEGORIES)
        assert search(catalog, 'JsOn', ALL_CATEGORIES) == search(catalog, 'json', ALL_CATEGORIES)

    def test_no_match_returns_empty(self, catalog):
        assert search(catalog, 'zzzzzznotfound', ALL_CATEGORIES) == ()

    def test_unknown_category_returns_empty(self, catalog):
        assert search(catalog, '', 'Quantum') == ()

    def test_results_keep_catalog_order(self, catalog):
        result = search(catalog, 'test', ALL_CATEGORIES)
        order = list(catalog.all())
        positions = [order.index(tool) for tool in result]
        assert positions == sorted(positions)

    def test_idempotent(self, catalog):
        first = search(catalog, 'css', 'Design')
        second = search(catalog, 'css', 'Design')
        assert first == second
        assert first

    @pytest.mark.parametrize('query', [
        '',
        ' ',
        '⇄',
        'ünïcödé',
        '.*[regex(',
        '\\',
        '\x00',
        'a' * 10000,
    ])
    @pytest.mark.parametrize('category', (ALL_CATEGORIES,) + CATEGORIES)
    def test_total_over_any_input(self, catalog, query, category):
        result = search(catalog, query, category)
        assert isinstance(result, tuple)

    def test_non_ascii_name_is_searchable(self, catalog):
        assert names(search(catalog, '⇄', ALL_CATEGORIES)) == ['YAML ⇄ JSON Converter']


class TestLiteralMatching:
    """The query is matched verbatim: no trimming and no tokenizing."""

    def test_leading_space_is_not_trimmed(self, tool_factory):
        tool = tool_factory('JSON', 'Data', tags=['json'], description='x')
        catalog = ToolCatalog([tool])
        assert search(catalog, 'json', ALL_CATEGORIES) == (tool,)
        assert search(catalog, ' json', ALL_CATEGORIES) == ()
        assert search(catalog, 'json ', ALL_CATEGORIES) == ()

    def test_space_inside_text_matches(self, tool_factory):
        tool = tool_factory('Pretty', 'Data', tags=['yaml-json'], description='Turn JSON pretty')
        catalog = ToolCatalog([tool])
        assert search(catalog, ' json', ALL_CATEGORIES) == (tool,)

    def test_tag_substring_match(self, tool_factory):
        tool = tool_factory('Conv', 'Conversion', tags=['yaml-json'], description='x')
        assert matches_query(tool, 'json')
        assert matches_query(tool, 'ml-js')

    def test_multiple_words_are_not_tokenized(self, tool_factory):
        tool = tool_factory('JSON Formatter', 'Data', tags=['json'], description='Format data')
        assert not matches_query(tool, 'formatter json')
        assert matches_query(tool, 'json formatter')

    def test_multiword_tag(self, catalog):
        assert names(search(catalog, 'natural lang', ALL_CATEGORIES)) == [
            'Cron Expression Generator',
            'SQL Query Generator'
        ]
        assert names(search(catalog, 'natural lang', 'Development')) == ['SQL Query Generator']


class TestApplyFilter:
    def test_showing_counts(self, catalog):
        result = apply_filter(catalog, FilterState(query='css', category='Design'))
        assert result.total == catalog.count()
        assert result.shown == len(result.tools)
        assert 0 < result.shown < result.total
        assert not result.is_empty

    def test_empty_state(self, catalog):
        result = apply_filter(catalog, FilterState(query='zzzzzznotfound'))
        assert result.is_empty
        assert result.shown == 0
        assert result.total == catalog.count()

    def test_to_dict(self, catalog):
        data = apply_filter(catalog, FilterState(query='jwt')).to_dict()
        assert data['shown'] == 1
        assert data['total'] == 22
        assert data['filters'] == {'query': 'jwt', 'category': 'all', 'active': True}
        assert data['tools'][0]['route'] == '/tools/jwt-decoder'


class TestFilterState:
    def test_defaults(self):
        state = FilterState()
        assert state.query == ''
        assert state.category == ALL_CATEGORIES
        assert not state.is_active

    def test_active_when_query_or_category_set(self):
        assert FilterState(query='x').is_active
        assert FilterState(category='Design').is_active
        # whitespace is a real query
        assert FilterState(query=' ').is_active

    def test_cleared(self):
        assert FilterState(query='x', category='Data').cleared() == FilterState()

    def test_from_args(self):
        state = FilterState.from_args({'q': ' json ', 'category': 'Data'})
        assert state == FilterState(query=' json ', category='Data')

    def test_from_args_defaults(self):
        assert FilterState.from_args({}) == FilterState()
        assert FilterState.from_args({'q': '', 'category': ''}) == FilterState()
