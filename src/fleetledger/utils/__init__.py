"""Utility functions for fleetledger."""

from fleetledger.utils.date_parser import parse_date
from fleetledger.utils.amount_parser import normalize_amount, parse_amount
from fleetledger.utils.logging_config import configure_logging

__all__ = ["parse_date", "normalize_amount", "parse_amount", "configure_logging"]
