"""The collector driven through the UI facade, as the obfuscate flow uses it."""

import pytest

from lr_options.collector import collect_options
from lr_ui.presenters.options import (
    build_order_table,
    build_values_table,
    checkbox_item,
    choice_items,
    dropdown_title,
    tier_badge,
)
from lr_options.models import OptionTier
from lr_options.resolver import resolve_order
from lr_options.segmenter import segment
from lr_ui.tui.adapters.prompter_adapter import CHECKBOX_TITLE, OptionPrompterAdapter
from lr_ui.tui.system.headless import HeadlessUI

pytestmark = pytest.mark.unit_ui


def test_scenario_through_headless_ui(scenario_options):
    ui = HeadlessUI(pick_many_responses=[["A", "B"]], pick_one_responses=["y"])

    values = collect_options(scenario_options, OptionPrompterAdapter(ui))

    assert values == {"A": True, "B": True, "C": "y"}
    assert ui.recorded_titles[0] == CHECKBOX_TITLE
    assert ui.recorded_titles[1].startswith("Luraph - Select Option: C")


def test_hidden_checkbox_cannot_be_ticked(scenario_options):
    ui = HeadlessUI(pick_many_responses=[["B"]])
    values = collect_options(scenario_options, OptionPrompterAdapter(ui))
    assert values == {"A": False, "B": False, "C": "x"}


def test_dismissing_dropdown_returns_none(scenario_options):
    ui = HeadlessUI(pick_many_responses=[["A"]], pick_one_responses=[None])
    assert collect_options(scenario_options, OptionPrompterAdapter(ui)) is None


def test_text_option_uses_form(make_option, make_options):
    options = make_options(make_option("WATERMARK", type="TEXT", description="Shown in output"))
    ui = HeadlessUI(form_responses=["hello"])
    assert collect_options(options, OptionPrompterAdapter(ui)) == {"WATERMARK": "hello"}


def test_tier_decoration(make_option):
    premium = make_option("P", tier="PREMIUM_ONLY", description="Fast")
    assert tier_badge(OptionTier.PREMIUM_ONLY) == "★ Premium feature"
    assert tier_badge(OptionTier.ADMIN_ONLY) == "🔒 Administrator-only feature"
    assert tier_badge(OptionTier.CUSTOMER_ONLY) == ""

    item = checkbox_item(premium, selected=True)
    assert item.tags == ("★ Premium feature",)
    assert item.description.startswith("P (Premium feature)")
    assert item.selected

    assert dropdown_title(premium) == "Luraph - Select Option: P (Premium feature) - Fast [P]"


def test_first_choice_is_default_and_undecorated(make_option):
    option = make_option("D", type="DROPDOWN", tier="ADMIN_ONLY", choices=["one", "two"])
    first, second = choice_items(option, option.choices)
    assert first.selected and first.description == "(default)" and first.tags == ()
    assert not second.selected
    assert second.tags == ("🔒 Administrator-only feature",)


def test_values_table_marks_checkboxes(scenario_options):
    table = build_values_table(scenario_options, {"A": True, "B": False, "C": ""})
    assert table.columns == ["Option", "ID", "Value"]
    assert table.rows == [["A", "A", "✅"], ["B", "B", "❌"], ["C", "C", '""']]


def test_order_table_lists_units(scenario_options):
    units = segment(resolve_order(scenario_options), scenario_options)
    table = build_order_table("node-a", scenario_options, units)
    assert [row[0] for row in table.rows] == ["1 (cluster)", "1 (cluster)", "2 (single)"]
    assert table.rows[1][5] == "A in [✅]"
    assert table.rows[2][6] == "x, y"
