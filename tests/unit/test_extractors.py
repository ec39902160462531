#
# tests/unit/test_extractors.py
#
"""
Tests for the block-style and scenario-style extractors on real sources.
"""

import pytest

from suitediff.decorator import HierarchicalDecorator
from suitediff.extraction import (
    BlockStyleExtractor,
    Extractor,
    ScenarioStyleExtractor,
    get_extractor,
)
from suitediff.models import DYNAMIC_NAME
from suitediff.syntax import TreeSitterProvider


def _extract(provider: TreeSitterProvider, extractor: Extractor, source: str, path: str = "a.spec.js"):
    return extractor.extract(provider.parse(source, path))


class TestBlockStyleExtractor:
    """Mocha/cypress style describe/it trees."""

    @pytest.fixture
    def extractor(self) -> BlockStyleExtractor:
        return BlockStyleExtractor()

    def test_login_example(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor, login_spec: str
    ) -> None:
        records = _extract(provider, extractor, login_spec)
        decorator = HierarchicalDecorator(records)

        assert decorator.full_names() == ["Login > succeeds", "Login > fails on bad password"]
        assert decorator.skipped_full_names() == ["Login > fails on bad password"]

    def test_every_direct_leaf_gets_the_group_path(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor
    ) -> None:
        source = "describe('Cart', function () {\n" + "".join(
            f"  it('item {i}', () => {{}});\n" for i in range(7)
        ) + "});\n"
        records = _extract(provider, extractor, source)

        assert len(records) == 7
        assert all(record.suite_path == ("Cart",) for record in records)
        assert [record.name for record in records] == [f"item {i}" for i in range(7)]

    def test_nested_suites_and_aliases(self, provider: TreeSitterProvider, extractor: BlockStyleExtractor) -> None:
        source = """
        suite('API', () => {
          context('users', () => {
            describe('create', () => {
              specify('returns 201', () => {});
            });
            test('lists users', () => {});
          });
        });
        """
        records = _extract(provider, extractor, source)

        assert [(r.suite_path, r.name) for r in records] == [
            (("API", "users", "create"), "returns 201"),
            (("API", "users"), "lists users"),
        ]

    def test_skipped_group_propagates_to_leaves(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor
    ) -> None:
        source = """
        describe.skip('Disabled', () => {
          it('inherits skip', () => {});
          describe('Inner', () => { it('deep', () => {}); });
        });
        describe('Enabled', () => { it('runs', () => {}); });
        """
        records = {r.name: r for r in _extract(provider, extractor, source)}

        assert records["inherits skip"].skipped
        assert records["deep"].skipped
        assert records["deep"].suite_skips == (True, False)
        assert not records["runs"].skipped

    def test_skipped_leaf_in_enabled_group(self, provider: TreeSitterProvider, extractor: BlockStyleExtractor) -> None:
        records = _extract(provider, extractor, "describe('A', () => { it.skip('x', () => {}); });")
        assert records[0].skipped
        assert records[0].suite_skips == (False,)

    def test_x_prefix_disables(self, provider: TreeSitterProvider, extractor: BlockStyleExtractor) -> None:
        source = """
        xdescribe('Off', () => { it('a', () => {}); });
        describe('On', () => { xit('b', () => {}); it('c', () => {}); });
        """
        skipped = {r.name: r.skipped for r in _extract(provider, extractor, source)}
        assert skipped == {"a": True, "b": True, "c": False}

    def test_x_prefix_of_unknown_name_is_ignored(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor
    ) -> None:
        assert _extract(provider, extractor, "xhr('GET', () => {});") == []

    def test_only_is_extracted_and_not_skipped(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor
    ) -> None:
        source = "describe.only('Focus', () => { it.only('me', () => {}); it('sibling', () => {}); });"
        records = _extract(provider, extractor, source)

        assert [r.name for r in records] == ["me", "sibling"]
        assert not any(r.skipped for r in records)

    def test_declarations_inside_ordinary_statements(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor
    ) -> None:
        source = """
        describe('Matrix', () => {
          if (process.env.CI) {
            it('only on CI', () => {});
          }
          for (const browser of browsers) {
            it(`works on ${browser}`, () => {});
          }
          helper(() => { it('inside helper', () => {}); });
        });
        """
        records = _extract(provider, extractor, source)

        assert [r.name for r in records] == ["only on CI", "works on ${browser}", "inside helper"]
        assert all(r.suite_path == ("Matrix",) for r in records)

    def test_wrapped_suite_callback_is_searched(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor
    ) -> None:
        source = """
        describe('A', function () { it('x', f); }.bind(this));
        describe('A', () => it('y', f));
        describe('B', wrap(() => { it('z', f); }));
        """
        records = _extract(provider, extractor, source)

        assert [(r.suite_path, r.name) for r in records] == [
            (("A",), "x"),
            (("A",), "y"),
            (("B",), "z"),
        ]

    def test_dynamic_names_use_placeholder(self, provider: TreeSitterProvider, extractor: BlockStyleExtractor) -> None:
        source = "describe(suiteName, () => { it(caseName, () => {}); });"
        records = _extract(provider, extractor, source)

        assert len(records) == 1
        assert records[0].suite_path == (DYNAMIC_NAME,)
        assert records[0].name == DYNAMIC_NAME

    def test_unknown_qualifier_is_not_a_declaration(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor
    ) -> None:
        source = "it.each([1, 2])('adds %i', (n) => {}); it('plain', () => {});"
        assert [r.name for r in _extract(provider, extractor, source)] == ["plain"]

    def test_test_body_is_not_searched(self, provider: TreeSitterProvider, extractor: BlockStyleExtractor) -> None:
        source = "it('outer', () => { it('not a real test', () => {}); });"
        assert [r.name for r in _extract(provider, extractor, source)] == ["outer"]

    def test_records_have_lines_and_no_file(
        self, provider: TreeSitterProvider, extractor: BlockStyleExtractor
    ) -> None:
        records = _extract(provider, extractor, "\n\nit('third line', () => {});")
        assert records[0].line == 3
        assert records[0].file is None

    def test_typescript_source(self, provider: TreeSitterProvider, extractor: BlockStyleExtractor) -> None:
        source = """
        interface User { name: string }
        describe('typed', () => {
          it('narrows', async (): Promise<void> => {
            const user: User = { name: 'a' };
          });
        });
        """
        records = _extract(provider, extractor, source, path="typed.spec.ts")
        assert [(r.suite_path, r.name) for r in records] == [(("typed",), "narrows")]


class TestScenarioStyleExtractor:
    """codeceptjs Feature/Scenario files."""

    @pytest.fixture
    def extractor(self) -> ScenarioStyleExtractor:
        return ScenarioStyleExtractor()

    def test_login_feature(self, provider: TreeSitterProvider, extractor: ScenarioStyleExtractor) -> None:
        source = """
        Feature('Login');
        Scenario('can login', ({ I }) => { I.amOnPage('/'); });
        Scenario.skip('cannot login twice', ({ I }) => {});
        """
        decorator = HierarchicalDecorator(_extract(provider, extractor, source))

        assert decorator.full_names() == ["Login > can login", "Login > cannot login twice"]
        assert decorator.skipped_full_names() == ["Login > cannot login twice"]

    def test_skipped_feature_skips_all_scenarios(
        self, provider: TreeSitterProvider, extractor: ScenarioStyleExtractor
    ) -> None:
        source = "Feature.skip('Checkout');\nScenario('pays', () => {});\nScenario('refunds', () => {});"
        records = _extract(provider, extractor, source)
        assert all(r.skipped for r in records)
        assert all(r.suite_path == ("Checkout",) for r in records)

    def test_scenarios_without_feature(self, provider: TreeSitterProvider, extractor: ScenarioStyleExtractor) -> None:
        records = _extract(provider, extractor, "Scenario('orphan', () => {});")
        assert records[0].suite_path == ()

    def test_describe_is_not_a_scenario_declaration(
        self, provider: TreeSitterProvider, extractor: ScenarioStyleExtractor
    ) -> None:
        source = "Feature('F');\ndescribe('block', () => { it('x', () => {}); });"
        assert _extract(provider, extractor, source) == []


class TestExtractorFactory:
    @pytest.mark.parametrize("framework", ["mocha", "cypress", "Cypress.io", "cypressio", "jest"])
    def test_block_style_frameworks(self, framework: str) -> None:
        assert isinstance(get_extractor(framework), BlockStyleExtractor)

    @pytest.mark.parametrize("framework", ["codecept", "CodeceptJS"])
    def test_scenario_style_frameworks(self, framework: str) -> None:
        assert isinstance(get_extractor(framework), ScenarioStyleExtractor)

    def test_unknown_framework_falls_back_to_block_style(self) -> None:
        extractor = get_extractor("vitest")
        assert isinstance(extractor, BlockStyleExtractor)
        assert isinstance(extractor, Extractor)
