"""PoE status, settings and power control."""

from __future__ import annotations

from .errors import OperationError
from .logging_setup import log
from .manager import DataManager
from .models import (
    PoeLimitType,
    PoeMode,
    PoePortSettings,
    PoePortStatus,
    PoePriority,
    PoeUpdate,
)
from .parser.extractor import parse_poe_settings, parse_poe_status


class PoeManager(DataManager):
    def get_status(self) -> list[PoePortStatus]:
        body = self._fetch("poe_status")
        return parse_poe_status(body, self.client.model.family)

    def get_settings(self) -> list[PoePortSettings]:
        return parse_poe_settings(self._fetch("poe_settings"))

    def get_port_status(self, port_id: int) -> PoePortStatus:
        return self._find_port(self.get_status(), port_id)

    def get_port_settings(self, port_id: int) -> PoePortSettings:
        return self._find_port(self.get_settings(), port_id)

    def update_port(self, *updates: PoeUpdate) -> None:
        """Apply each sparse update; only fields that are set are sent."""
        self._require_auth()
        if not updates:
            raise OperationError("no updates provided")
        forms = [update.to_form() for update in updates]
        for update, form in zip(updates, forms):
            self._submit("poe_update", form, update.port_id, "PoE update")

    def cycle_power(self, *port_ids: int) -> None:
        self._require_auth()
        if not port_ids:
            raise OperationError("no ports specified for power cycle")
        for port_id in port_ids:
            self._submit("poe_update", {"port": str(port_id), "action": "cycle"}, port_id, "power cycle")
            log.info("Cycled PoE power on port %d of %s", port_id, self.client.address)

    def enable_port(self, port_id: int) -> None:
        self.update_port(PoeUpdate(port_id, enabled=True))

    def disable_port(self, port_id: int) -> None:
        self.update_port(PoeUpdate(port_id, enabled=False))

    def set_port_mode(self, port_id: int, mode: PoeMode) -> None:
        self.update_port(PoeUpdate(port_id, mode=mode))

    def set_port_priority(self, port_id: int, priority: PoePriority) -> None:
        self.update_port(PoeUpdate(port_id, priority=priority))

    def set_port_power_limit(self, port_id: int, limit_type: PoeLimitType, limit_w: float) -> None:
        self.update_port(PoeUpdate(port_id, power_limit_type=limit_type, power_limit_w=limit_w))
