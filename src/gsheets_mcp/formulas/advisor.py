"""Keyword-driven formula suggestions."""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from ..sheets import GoogleSheetsClient, SpreadsheetRef
from .catalog import (
    CONDITIONAL_OPERATIONS,
    DATE_OPERATIONS,
    DEFAULT_FORMULA,
    LOOKUP_OPERATIONS,
    MATH_OPERATIONS,
    STATISTICAL_OPERATIONS,
    TEXT_OPERATIONS,
)

logger = logging.getLogger(__name__)

CONTEXT_SAMPLE_ROWS = 3


@dataclass(frozen=True)
class Keywords:
    """Substring predicate over a lowercased description.

    Every ``all_of`` keyword and at least one ``any_of`` keyword must be
    present. An empty predicate matches everything.
    """

    any_of: tuple[str, ...] = ()
    all_of: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        if not all(keyword in text for keyword in self.all_of):
            return False
        if self.any_of and not any(keyword in text for keyword in self.any_of):
            return False
        return True


ALWAYS = Keywords()


@dataclass(frozen=True)
class Rule:
    """A predicate and the formula it selects."""

    when: Keywords
    formula: str


@dataclass(frozen=True)
class Branch:
    """A group of rules guarded by a trigger.

    Once the trigger matches, the branch claims the description: if none of
    its rules match, later branches are not consulted.
    """

    name: str
    trigger: Keywords
    rules: tuple[Rule, ...] = field(default_factory=tuple)


BRANCHES: tuple[Branch, ...] = (
    Branch(
        "sumif",
        Keywords(all_of=("sum", "if")),
        (Rule(ALWAYS, MATH_OPERATIONS["sumif"]),),
    ),
    Branch(
        "countif",
        Keywords(all_of=("count", "if")),
        (Rule(ALWAYS, MATH_OPERATIONS["countif"]),),
    ),
    Branch(
        "lookup",
        Keywords(any_of=("lookup", "search")),
        (
            Rule(Keywords(any_of=("vertical", "column")), LOOKUP_OPERATIONS["vlookup"]),
            Rule(Keywords(any_of=("horizontal", "row")), LOOKUP_OPERATIONS["hlookup"]),
        ),
    ),
    Branch(
        "date",
        Keywords(any_of=("date",)),
        (
            Rule(Keywords(any_of=("today",)), DATE_OPERATIONS["today"]),
            Rule(Keywords(any_of=("now",)), DATE_OPERATIONS["now"]),
            Rule(Keywords(any_of=("difference", "between")), DATE_OPERATIONS["datedif"]),
        ),
    ),
    Branch(
        "text",
        Keywords(any_of=("text", "string")),
        (
            Rule(Keywords(any_of=("combine", "join")), TEXT_OPERATIONS["concatenate"]),
            Rule(Keywords(any_of=("length",)), TEXT_OPERATIONS["len"]),
            Rule(Keywords(any_of=("uppercase",)), TEXT_OPERATIONS["upper"]),
            Rule(Keywords(any_of=("lowercase",)), TEXT_OPERATIONS["lower"]),
        ),
    ),
    Branch(
        "conditional",
        Keywords(any_of=("condition", "if")),
        (
            Rule(Keywords(any_of=("error",)), CONDITIONAL_OPERATIONS["iferror"]),
            Rule(Keywords(any_of=("and",)), CONDITIONAL_OPERATIONS["and"]),
            Rule(Keywords(any_of=("or",)), CONDITIONAL_OPERATIONS["or"]),
            Rule(ALWAYS, CONDITIONAL_OPERATIONS["if"]),
        ),
    ),
    Branch(
        "statistical",
        Keywords(any_of=("statistics", "stat")),
        (
            Rule(Keywords(any_of=("deviation",)), STATISTICAL_OPERATIONS["stdev"]),
            Rule(Keywords(any_of=("variance",)), STATISTICAL_OPERATIONS["var"]),
            Rule(Keywords(any_of=("median",)), STATISTICAL_OPERATIONS["median"]),
            Rule(Keywords(any_of=("mode",)), STATISTICAL_OPERATIONS["mode"]),
        ),
    ),
)


@dataclass(frozen=True)
class FormulaSuggestion:
    """A formula template and how it was picked.

    ``source`` is one of ``rule``, ``catalog``, ``default`` or ``fallback``
    (an internal error occurred).
    """

    formula: str
    source: str
    branch: Optional[str] = None


def select_formula(description: str, branches: tuple[Branch, ...] = BRANCHES) -> FormulaSuggestion:
    """Pick a formula template for a free-text description."""
    text = description.lower()

    for branch in branches:
        if not branch.trigger.matches(text):
            continue
        for rule in branch.rules:
            if rule.when.matches(text):
                return FormulaSuggestion(rule.formula, "rule", branch.name)
        break

    for keyword, formula in MATH_OPERATIONS.items():
        if keyword in text:
            return FormulaSuggestion(formula, "catalog")

    return FormulaSuggestion(DEFAULT_FORMULA, "default")


def summarize_values(range_notation: str, values: list[list]) -> str:
    """Describe the shape of a range and its first few rows."""
    width = len(values[0]) if values else 0
    summary = f"Selected range ({range_notation}) contains {len(values)} rows and {width} columns.\n"
    summary += f"Sample data: {json.dumps(values[:CONTEXT_SAMPLE_ROWS])}\n"
    return summary


class FormulaAdvisor:
    """Suggests formula templates; never raises."""

    def __init__(self, client: Optional[GoogleSheetsClient] = None):
        self.client = client

    def describe_context(self, ref: SpreadsheetRef) -> Optional[str]:
        """Summarize the target range, or None if it can't be read."""
        if self.client is None:
            return None
        try:
            values = self.client.get_values(ref.spreadsheet_id, ref.range)
        except Exception as e:
            logger.warning(f"Could not fetch context data: {e}")
            return None
        if not values:
            return None
        return summarize_values(ref.range, values)

    def suggest(self, ref: SpreadsheetRef, description: str) -> FormulaSuggestion:
        """Suggest a formula for ``description``; falls back to SUM on any error."""
        try:
            context = self.describe_context(ref)
            if context:
                logger.debug(f"Formula context: {context}")
            suggestion = select_formula(description)
        except Exception as e:
            logger.error(f"Error generating formula suggestion: {e}")
            return FormulaSuggestion(DEFAULT_FORMULA, "fallback")

        logger.info(f"Suggested {suggestion.formula} ({suggestion.source}) for {description!r}")
        return suggestion
