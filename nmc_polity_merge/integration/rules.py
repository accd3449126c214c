"""
Catalogue of country-code reconciliation rules.

Polity5 and the Correlates of War state system number several entities
differently: predecessor states that COW folds into their successor,
the Yugoslav succession, the Sudan partition, and so on.  Each entry in
``RULES`` describes one such event and how to rewrite the Polity codes
so that they line up with COW.  The table is historical data, not an
algorithm; the values below must not be changed without checking them
against both codebooks.

Rules are applied in list order.  Where a rule reads a code space that
an earlier rule produces, the dependency is declared in ``after`` and
enforced by :func:`check_rule_order`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..exceptions import RuleOrderError


class RuleMode(str, Enum):
    DIRECT_RECODE = "direct-recode"
    RECODE_WITH_DROP = "recode-with-drop"
    SWAP = "swap"
    COPY_FORWARD = "copy-forward"


@dataclass(frozen=True)
class ConflictDrop:
    """In ``year`` the row coded ``code`` is removed; ``survivor`` is kept."""

    code: int
    year: int
    survivor: int


@dataclass(frozen=True)
class ReconciliationRule:
    name: str
    description: str
    mode: RuleMode
    # (source, target) pairs, applied simultaneously
    mapping: tuple[tuple[int, int], ...] = ()
    drops: tuple[ConflictDrop, ...] = ()
    donor: int | None = None
    new_code: int | None = None
    after: tuple[str, ...] = ()

    @property
    def source_codes(self) -> tuple[int, ...]:
        if self.mode is RuleMode.COPY_FORWARD:
            return (self.donor,)
        return tuple(src for src, _ in self.mapping)

    @property
    def target_codes(self) -> tuple[int, ...]:
        if self.mode is RuleMode.COPY_FORWARD:
            return (self.new_code,)
        return tuple(dict.fromkeys(tgt for _, tgt in self.mapping))


RULES: list[ReconciliationRule] = [
    ReconciliationRule(
        name="gran_colombia",
        description="Gran Colombia (99) folded into Colombia (100)",
        mode=RuleMode.RECODE_WITH_DROP,
        mapping=((99, 100),),
        drops=(ConflictDrop(code=99, year=1832, survivor=100),),
    ),
    ReconciliationRule(
        name="sardinia_italy",
        description="Sardinia (324) folded into Italy (325)",
        mode=RuleMode.RECODE_WITH_DROP,
        mapping=((324, 325),),
        drops=(ConflictDrop(code=324, year=1861, survivor=325),),
    ),
    ReconciliationRule(
        name="yugoslavia_serbia",
        description=(
            "Serbia (342) and Serbia and Montenegro (347) folded into "
            "Yugoslavia/Serbia (345)"
        ),
        mode=RuleMode.RECODE_WITH_DROP,
        mapping=((342, 345), (347, 345)),
        drops=(
            ConflictDrop(code=347, year=1991, survivor=345),
            ConflictDrop(code=347, year=2006, survivor=342),
        ),
    ),
    ReconciliationRule(
        name="montenegro_kosovo",
        description="Kosovo 341 -> 347 and Montenegro 348 -> 341",
        mode=RuleMode.SWAP,
        mapping=((341, 347), (348, 341)),
        # 347 must be vacated first or Kosovo is merged into Serbia
        after=("yugoslavia_serbia",),
    ),
    ReconciliationRule(
        name="ussr_russia",
        description="USSR (364) folded into Russia (365)",
        mode=RuleMode.RECODE_WITH_DROP,
        mapping=((364, 365),),
        drops=(ConflictDrop(code=364, year=1922, survivor=365),),
    ),
    ReconciliationRule(
        name="sudan",
        description=(
            "Sudan-North (626) folded into Sudan (625), then South Sudan "
            "525 -> 626"
        ),
        mode=RuleMode.RECODE_WITH_DROP,
        mapping=((626, 625), (525, 626)),
        drops=(ConflictDrop(code=626, year=2011, survivor=625),),
    ),
    ReconciliationRule(
        name="pakistan",
        description="Pakistan (769) recoded to Pakistan (770)",
        mode=RuleMode.DIRECT_RECODE,
        mapping=((769, 770),),
    ),
    ReconciliationRule(
        name="vietnam",
        description="Vietnam (818) folded into Vietnam (816)",
        mode=RuleMode.RECODE_WITH_DROP,
        mapping=((818, 816),),
        # identical values in 1976, either row would do
        drops=(ConflictDrop(code=818, year=1976, survivor=816),),
    ),
    ReconciliationRule(
        name="austria_hungary",
        description="Austria-Hungary (300) backfilled from Austria (305)",
        mode=RuleMode.COPY_FORWARD,
        donor=305,
        new_code=300,
    ),
]


def get_rule(name: str, rules: Iterable[ReconciliationRule] = RULES) -> ReconciliationRule:
    for rule in rules:
        if rule.name == name:
            return rule
    raise KeyError(name)


def check_rule_order(rules: Iterable[ReconciliationRule]) -> None:
    """Raise :class:`RuleOrderError` unless every dependency runs first."""
    seen: set[str] = set()
    for rule in rules:
        missing = [dep for dep in rule.after if dep not in seen]
        if missing:
            raise RuleOrderError(
                f"rule '{rule.name}' must run after {', '.join(missing)}"
            )
        seen.add(rule.name)
