"""Switch models, credentials and the records exchanged with the switch."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

from .config import GENERIC_30X_MODEL
from .errors import ModelNotSupported, OperationError


class Family(str, Enum):
    """Authentication family shared by a group of models."""

    SESSION = "session"   # cookie-carried SID (GS30x)
    GAMBIT = "gambit"     # token in every query string / form body (GS316)


class Model(str, Enum):
    GS305EP = "GS305EP"
    GS305EPP = "GS305EPP"
    GS308EP = "GS308EP"
    GS308EPP = "GS308EPP"
    GS316EP = "GS316EP"
    GS316EPP = "GS316EPP"
    GS30xEPx = GENERIC_30X_MODEL

    @classmethod
    def parse(cls, value: str) -> "Model":
        """Return the Model named *value*; unknown names raise ModelNotSupported."""
        try:
            return cls(value.strip())
        except ValueError:
            raise ModelNotSupported(f"unknown model '{value}'") from None

    @property
    def family(self) -> Family:
        return Family.GAMBIT if self.is_316 else Family.SESSION

    @property
    def is_30x(self) -> bool:
        return self in (Model.GS305EP, Model.GS305EPP, Model.GS308EP,
                        Model.GS308EPP, Model.GS30xEPx)

    @property
    def is_316(self) -> bool:
        return self in (Model.GS316EP, Model.GS316EPP)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Credential:
    """Token issued by the switch plus the model it was issued for."""

    token: str
    model: Model

    def __repr__(self) -> str:
        return f"Credential(token=<{len(self.token)} chars>, model={self.model.value})"


@dataclass
class SwitchConfig:
    """Login seed material resolved for one switch address."""

    host: str
    password: str
    model: str = ""

    def __repr__(self) -> str:
        return f"SwitchConfig(host={self.host!r}, password=<hidden>, model={self.model!r})"


# ---------------------------------------------------------------------------
# Value enums
# ---------------------------------------------------------------------------

class PoeMode(str, Enum):
    IEEE_802_3AF = "802.3af"
    IEEE_802_3AT = "802.3at"
    LEGACY = "legacy"
    PRE_802_3AT = "pre-802.3at"


class PoePriority(str, Enum):
    LOW = "low"
    HIGH = "high"
    CRITICAL = "critical"


class PoeLimitType(str, Enum):
    NONE = "none"
    CLASS = "class"
    USER = "user"


class PortSpeed(str, Enum):
    AUTO = "auto"
    HALF_10M = "10M half"
    FULL_10M = "10M full"
    HALF_100M = "100M half"
    FULL_100M = "100M full"
    DISABLE = "disable"


# ---------------------------------------------------------------------------
# Records parsed from the switch
# ---------------------------------------------------------------------------

@dataclass
class PoePortStatus:
    port_id: int
    port_name: str = ""
    status: str = ""
    power_class: str = ""
    voltage_v: float = 0.0
    current_ma: float = 0.0
    power_w: float = 0.0
    temperature_c: float = 0.0
    error_status: str = ""


@dataclass
class PoePortSettings:
    port_id: int
    port_name: str = ""
    enabled: bool = False
    mode: str = ""
    priority: str = ""
    power_limit_type: str = ""
    power_limit_w: float = 0.0
    detection_type: str = ""
    longer_detection_time: bool = False


@dataclass
class PortSettings:
    port_id: int
    port_name: str = ""
    speed: str = ""
    ingress_limit: str = ""
    egress_limit: str = ""
    flow_control: bool = False
    status: str = ""
    link_speed: str = ""


# ---------------------------------------------------------------------------
# Sparse updates
# ---------------------------------------------------------------------------

class _SparseUpdate:
    """Mixin for partial updates: ``None`` means "leave unchanged"."""

    port_id: int

    def changed_fields(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.name != "port_id" and getattr(self, f.name) is not None
        }

    def validate(self) -> None:
        if not self.changed_fields():
            raise OperationError(f"no fields set in update for port {self.port_id}")


@dataclass
class PoeUpdate(_SparseUpdate):
    port_id: int
    enabled: bool | None = None
    mode: PoeMode | str | None = None
    priority: PoePriority | str | None = None
    power_limit_type: PoeLimitType | str | None = None
    power_limit_w: float | None = None
    detection_type: str | None = None

    def to_form(self) -> dict[str, str]:
        """Encode the set fields as the switch's PoE form parameters."""
        self.validate()
        form = {"port": str(self.port_id)}
        if self.enabled is not None:
            form["enabled"] = "1" if self.enabled else "0"
        if self.mode is not None:
            form["mode"] = _enum_value(self.mode)
        if self.priority is not None:
            form["priority"] = _enum_value(self.priority)
        if self.power_limit_type is not None:
            form["power_limit_type"] = _enum_value(self.power_limit_type)
        if self.power_limit_w is not None:
            form["power_limit_w"] = f"{self.power_limit_w:.2f}"
        if self.detection_type is not None:
            form["detection_type"] = self.detection_type
        return form


@dataclass
class PortUpdate(_SparseUpdate):
    port_id: int
    name: str | None = None
    speed: PortSpeed | str | None = None
    ingress_limit: str | None = None
    egress_limit: str | None = None
    flow_control: bool | None = None

    def to_form(self) -> dict[str, str]:
        """Encode the set fields as the switch's port form parameters."""
        self.validate()
        form = {"port": str(self.port_id)}
        if self.name is not None:
            form["name"] = self.name
        if self.speed is not None:
            form["speed"] = _enum_value(self.speed)
        if self.ingress_limit is not None:
            form["ingress_limit"] = self.ingress_limit
        if self.egress_limit is not None:
            form["egress_limit"] = self.egress_limit
        if self.flow_control is not None:
            form["flow_control"] = "on" if self.flow_control else "off"
        return form


def _enum_value(value) -> str:
    return value.value if isinstance(value, Enum) else str(value)
