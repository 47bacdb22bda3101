from icon_search.formatting import SearchResult, format_results_table, format_text_results, import_statement, jsx_element
from icon_search.scoring import combine_layer_scores


def _result(name="SendRegular", variant="Regular", **layers):
    breakdown = combine_layer_scores(**layers)
    return SearchResult(
        name=name,
        base_name=name[: -len(variant)] if variant else name,
        variant=variant,
        available_sizes=("16", "24"),
        breakdown=breakdown,
        score_layer="semantic",
        match_reasons=('Semantic: "mail" -> "Send"',),
    )


def test_snippets():
    assert jsx_element("SendRegular") == "<SendRegular />"
    assert import_statement("SendRegular", "@acme/icons") == 'import { SendRegular } from "@acme/icons";'


def test_to_dict_rounds_and_explains():
    result = _result(semantic=24.5, fuzzy=3.2)
    data = result.to_dict("@acme/icons", explain=True)
    assert data["score"] == 28
    assert data["scoreBreakdown"]["semantic"] == 25
    assert data["scoreBreakdown"]["fuzzy"] == 3
    assert data["importStatement"] == 'import { SendRegular } from "@acme/icons";'
    assert data["matchReasons"] == ['Semantic: "mail" -> "Send"']
    assert "matchReasons" not in result.to_dict()


def test_category_falls_back():
    assert _result(name="Foo", variant="", semantic=10).category == "Icon"


def test_text_listing():
    assert format_text_results("zzz", []) == 'No icons found matching "zzz".'
    text = format_text_results("mail", [_result(semantic=25)], explain=True)
    assert "1. SendRegular (Regular) - score 25 [semantic]" in text
    assert "Sizes: 16, 24" in text
    assert 'Semantic: "mail" -> "Send"' in text


def test_results_table():
    table = format_results_table([_result(semantic=25)])
    assert "SendRegular" in table
    assert "Sem" in table.splitlines()[0]
