"""Utility functions for stockledger."""

from stockledger.utils.date_parser import parse_date, to_ledger_date
from stockledger.utils.quantity_parser import parse_quantity, parse_factor, format_quantity

__all__ = ["parse_date", "to_ledger_date", "parse_quantity", "parse_factor", "format_quantity"]
