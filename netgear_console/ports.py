"""Switch port settings."""

from __future__ import annotations

from .errors import OperationError
from .manager import DataManager
from .models import PortSettings, PortSpeed, PortUpdate
from .parser.extractor import parse_port_settings


class PortManager(DataManager):
    def get_settings(self) -> list[PortSettings]:
        return parse_port_settings(self._fetch("port_settings"))

    def get_port_settings(self, port_id: int) -> PortSettings:
        return self._find_port(self.get_settings(), port_id)

    def update_port(self, *updates: PortUpdate) -> None:
        self._require_auth()
        if not updates:
            raise OperationError("no updates provided")
        forms = [update.to_form() for update in updates]
        for update, form in zip(updates, forms):
            self._submit("port_update", form, update.port_id, "port update")

    def set_port_name(self, port_id: int, name: str) -> None:
        self.update_port(PortUpdate(port_id, name=name))

    def set_port_speed(self, port_id: int, speed: PortSpeed) -> None:
        self.update_port(PortUpdate(port_id, speed=speed))

    def set_port_flow_control(self, port_id: int, enabled: bool) -> None:
        self.update_port(PortUpdate(port_id, flow_control=enabled))

    def set_port_limits(self, port_id: int, ingress_limit: str, egress_limit: str) -> None:
        self.update_port(PortUpdate(port_id, ingress_limit=ingress_limit, egress_limit=egress_limit))

    def enable_port(self, port_id: int) -> None:
        self.set_port_speed(port_id, PortSpeed.AUTO)

    def disable_port(self, port_id: int) -> None:
        self.set_port_speed(port_id, PortSpeed.DISABLE)
