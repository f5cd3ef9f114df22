"""Post-processing passes that preserve full connectivity."""

from .balance import BalanceReport, balance_distribution
from .single_path import ensure_single_path

__all__ = ["BalanceReport", "balance_distribution", "ensure_single_path"]
