"""
Record extraction from the switch's data pages.

GS30x and GS316 render PoE status very differently, so that page has one
parser per family.  PoE settings and port settings are read from plain
``<table>`` rows (first row = header) by column position.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from ..config import BS4_PARSER
from ..models import Family, PoePortSettings, PoePortStatus, PortSettings

_TRUE_WORDS = {"1", "on", "yes", "true", "enable", "enabled"}


# ---------------------------------------------------------------------------
# Small field helpers
# ---------------------------------------------------------------------------

def parse_port_id_and_name(text: str) -> tuple[int, str]:
    """
    Split a port label such as ``"1 - Camera"`` into ``(1, "Camera")``.

    Only the first ``-`` separates id from name; non-breaking spaces are
    treated as spaces and a non-numeric id yields 0.
    """
    text = text.replace("\u00a0", " ").strip()
    port, _, name = text.partition("-")
    try:
        port_id = int(port.strip())
    except ValueError:
        return 0, ""
    return port_id, name.strip()


def power_class_from_i18n(text: str) -> str:
    """``"ml003@3@"`` -> ``"3"``; anything without two ``@`` -> ``""``."""
    parts = text.split("@")
    if len(parts) < 3:
        return ""
    return parts[1]


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _to_bool(text: str) -> bool:
    return text.strip().lower() in _TRUE_WORDS


def _text(el) -> str:
    return el.get_text(" ", strip=True) if el is not None else ""


# ---------------------------------------------------------------------------
# PoE status
# ---------------------------------------------------------------------------

def parse_poe_status_30x(html: str) -> list[PoePortStatus]:
    """Parse ``li.poePortStatusListItem`` entries from a GS30x status page."""
    soup = BeautifulSoup(html, BS4_PARSER)
    statuses = []
    for item in soup.select("li.poePortStatusListItem"):
        port_id, name = parse_port_id_and_name(_text(item.select_one("span.poe-port-index")))
        status = PoePortStatus(
            port_id=port_id,
            port_name=name,
            status=_text(item.select_one("span.poe-power-mode")),
            power_class=power_class_from_i18n(_text(item.select_one("span.poe-portPwr-width"))),
        )

        # Label/value span pairs: <span>Voltage:</span><span>48</span>
        values = {}
        spans = [s for s in item.select("div.poe_port_status span") if not s.find("span")]
        for label, value in zip(spans, spans[1:]):
            key = _text(label)
            if key.endswith(":"):
                values[key[:-1].strip().lower()] = _text(value)

        status.voltage_v = _to_float(values.get("voltage", "0"))
        status.current_ma = _to_float(values.get("current", "0"))
        status.power_w = _to_float(values.get("power", "0"))
        status.temperature_c = _to_float(values.get("temperature", "0"))
        status.error_status = values.get("error", "")
        statuses.append(status)
    return statuses


def parse_poe_status_316(html: str) -> list[PoePortStatus]:
    """Parse ``div.port-wrap`` blocks from a GS316 status page."""
    soup = BeautifulSoup(html, BS4_PARSER)
    statuses = []
    for block in soup.select("div.port-wrap"):
        port_id, name = parse_port_id_and_name(_text(block.select_one(".port-number")))
        statuses.append(PoePortStatus(
            port_id=port_id,
            port_name=name,
            status=_text(block.select_one(".Status-text")),
            power_class=power_class_from_i18n(_text(block.select_one(".Class-text"))),
            voltage_v=_to_float(_text(block.select_one(".OutputVoltage-text")) or "0"),
            current_ma=_to_float(_text(block.select_one(".OutputCurrent-text")) or "0"),
            power_w=_to_float(_text(block.select_one(".OutputPower-text")) or "0"),
            temperature_c=_to_float(_text(block.select_one(".Temperature-text")) or "0"),
            error_status=_text(block.select_one(".Fault-Status-text")),
        ))
    return statuses


def parse_poe_status(html: str, family: Family) -> list[PoePortStatus]:
    if family is Family.GAMBIT:
        return parse_poe_status_316(html)
    return parse_poe_status_30x(html)


# ---------------------------------------------------------------------------
# Tabular settings pages
# ---------------------------------------------------------------------------

def _table_rows(html: str):
    """Yield the stripped cell texts of every data row of every table."""
    soup = BeautifulSoup(html, BS4_PARSER)
    for table in soup.find_all("table"):
        for row in table.find_all("tr")[1:]:
            cells = [_text(td) for td in row.find_all("td")]
            if cells and re.fullmatch(r"\d+", cells[0]):
                yield cells


def _cell(cells: list[str], index: int) -> str:
    return cells[index] if index < len(cells) else ""


def parse_poe_settings(html: str) -> list[PoePortSettings]:
    """
    Columns: port, name, enabled, mode, priority, limit type, limit (W),
    detection type, longer detection time.
    """
    settings = []
    for cells in _table_rows(html):
        settings.append(PoePortSettings(
            port_id=int(cells[0]),
            port_name=_cell(cells, 1),
            enabled=_to_bool(_cell(cells, 2)),
            mode=_cell(cells, 3),
            priority=_cell(cells, 4),
            power_limit_type=_cell(cells, 5),
            power_limit_w=_to_float(_cell(cells, 6) or "0"),
            detection_type=_cell(cells, 7),
            longer_detection_time=_to_bool(_cell(cells, 8)),
        ))
    return settings


def parse_port_settings(html: str) -> list[PortSettings]:
    """
    Columns: port, name, speed, ingress limit, egress limit, flow control,
    status, link speed.
    """
    settings = []
    for cells in _table_rows(html):
        settings.append(PortSettings(
            port_id=int(cells[0]),
            port_name=_cell(cells, 1),
            speed=_cell(cells, 2),
            ingress_limit=_cell(cells, 3),
            egress_limit=_cell(cells, 4),
            flow_control=_to_bool(_cell(cells, 5)),
            status=_cell(cells, 6),
            link_speed=_cell(cells, 7),
        ))
    return settings
