"""HTML page parsers for PoE and port data."""

from netgear_console.parser.extractor import (
    parse_poe_settings,
    parse_poe_status,
    parse_poe_status_30x,
    parse_poe_status_316,
    parse_port_id_and_name,
    parse_port_settings,
    power_class_from_i18n,
)

__all__ = [
    "parse_poe_settings",
    "parse_poe_status",
    "parse_poe_status_30x",
    "parse_poe_status_316",
    "parse_port_id_and_name",
    "parse_port_settings",
    "power_class_from_i18n",
]
