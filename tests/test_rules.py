import pytest

from nmc_polity_merge.exceptions import RuleOrderError
from nmc_polity_merge.integration.rules import (
    RULES,
    ConflictDrop,
    RuleMode,
    check_rule_order,
    get_rule,
)


def test_catalogue_order():
    assert [r.name for r in RULES] == [
        "gran_colombia",
        "sardinia_italy",
        "yugoslavia_serbia",
        "montenegro_kosovo",
        "ussr_russia",
        "sudan",
        "pakistan",
        "vietnam",
        "austria_hungary",
    ]


@pytest.mark.parametrize(
    "name, mapping, drops",
    [
        ("gran_colombia", ((99, 100),), (ConflictDrop(99, 1832, 100),)),
        ("sardinia_italy", ((324, 325),), (ConflictDrop(324, 1861, 325),)),
        (
            "yugoslavia_serbia",
            ((342, 345), (347, 345)),
            (ConflictDrop(347, 1991, 345), ConflictDrop(347, 2006, 342)),
        ),
        ("montenegro_kosovo", ((341, 347), (348, 341)), ()),
        ("ussr_russia", ((364, 365),), (ConflictDrop(364, 1922, 365),)),
        ("sudan", ((626, 625), (525, 626)), (ConflictDrop(626, 2011, 625),)),
        ("pakistan", ((769, 770),), ()),
        ("vietnam", ((818, 816),), (ConflictDrop(818, 1976, 816),)),
    ],
)
def test_catalogue_values(name, mapping, drops):
    rule = get_rule(name)
    assert rule.mapping == mapping
    assert rule.drops == drops


def test_copy_forward_rule():
    rule = get_rule("austria_hungary")
    assert rule.mode is RuleMode.COPY_FORWARD
    assert (rule.donor, rule.new_code) == (305, 300)
    assert rule.source_codes == (305,)
    assert rule.target_codes == (300,)


def test_source_and_target_codes():
    rule = get_rule("yugoslavia_serbia")
    assert rule.source_codes == (342, 347)
    assert rule.target_codes == (345,)


def test_get_rule_unknown():
    with pytest.raises(KeyError):
        get_rule("prussia")


def test_catalogue_order_is_valid():
    check_rule_order(RULES)


def test_swap_before_yugoslavia_rejected():
    rules = list(RULES)
    swap = rules.pop(3)
    rules.insert(0, swap)
    with pytest.raises(RuleOrderError, match="yugoslavia_serbia"):
        check_rule_order(rules)


def test_missing_dependency_rejected():
    with pytest.raises(RuleOrderError):
        check_rule_order([get_rule("montenegro_kosovo")])
