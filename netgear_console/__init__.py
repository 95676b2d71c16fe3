"""
netgear_console
===============
Python package for driving the web console of Netgear GS305EP, GS308EP and
GS316EP PoE switches: model detection, login, token caching and PoE / port
configuration.

Package structure
-----------------
netgear_console/
├── __init__.py       – package init and public API
├── config.py         – configuration constants and endpoint tables
├── errors.py         – NetgearError hierarchy
├── models.py         – Model / Family enums, Credential, records, updates
├── logging_setup.py  – shared logger and coloured console output
├── credentials.py    – password resolvers (environment, static mapping)
├── client.py         – SwitchClient session façade
├── manager.py        – shared fetch / submit plumbing for the managers
├── poe.py            – PoeManager
├── ports.py          – PortManager
├── formatter.py      – markdown / JSON rendering
├── cli.py            – argparse CLI (``python -m netgear_console``)
├── network/          – requests.Session factory and Transport
├── auth/             – detection, password cipher, token extraction, login
├── storage/          – MemoryTokenStore / FileTokenStore
└── parser/           – HTML → PoE / port records

Quick start
-----------
    from netgear_console import SwitchClient, FileTokenStore

    with SwitchClient("192.168.0.239", token_store=FileTokenStore()) as client:
        if not client.is_authenticated:
            client.login("your_password")
        for port in client.poe.get_status():
            print(port.port_id, port.power_w)
"""

from .client      import SwitchClient
from .credentials import (
    EnvironmentPasswordResolver,
    PasswordResolver,
    StaticPasswordResolver,
)
from .errors      import (
    AuthenticationError,
    AutoLoginError,
    ModelError,
    NetgearError,
    NetworkError,
    NotAuthenticated,
    OperationError,
    ParsingError,
    SessionExpired,
)
from .models      import (
    Credential,
    Family,
    Model,
    PoeLimitType,
    PoeMode,
    PoePriority,
    PoeUpdate,
    PortSpeed,
    PortUpdate,
    SwitchConfig,
)
from .storage     import FileTokenStore, MemoryTokenStore, TokenStore

__all__ = [
    "SwitchClient",
    "EnvironmentPasswordResolver",
    "PasswordResolver",
    "StaticPasswordResolver",
    "AuthenticationError",
    "AutoLoginError",
    "ModelError",
    "NetgearError",
    "NetworkError",
    "NotAuthenticated",
    "OperationError",
    "ParsingError",
    "SessionExpired",
    "Credential",
    "Family",
    "Model",
    "PoeLimitType",
    "PoeMode",
    "PoePriority",
    "PoeUpdate",
    "PortSpeed",
    "PortUpdate",
    "SwitchConfig",
    "FileTokenStore",
    "MemoryTokenStore",
    "TokenStore",
]
