"""Formula catalog and suggestion logic."""

from .advisor import FormulaAdvisor, FormulaSuggestion, select_formula
from .catalog import DEFAULT_FORMULA

__all__ = ["FormulaAdvisor", "FormulaSuggestion", "select_formula", "DEFAULT_FORMULA"]
