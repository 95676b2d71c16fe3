"""
Tests for PoeManager and PortManager on top of a client with a mocked
transport.
"""

import unittest
from unittest.mock import MagicMock

import requests

from netgear_console.client import SwitchClient
from netgear_console.errors import (
    NotAuthenticated,
    OperationError,
    SessionExpired,
    TokenNotFound,
)
from netgear_console.models import Model, PoeMode, PoeUpdate, PortSpeed, PortUpdate
from netgear_console.storage.tokens import MemoryTokenStore

GS30X_STATUS = """
<ul>
  <li class="poePortStatusListItem">
    <span class="poe-port-index"><span>1 - Camera</span></span>
    <span class="poe-power-mode"><span>Delivering Power</span></span>
    <span class="poe-portPwr-width"><span>ml003@3@</span></span>
    <div class="poe_port_status"><span>Power:</span><span>7.20</span></div>
  </li>
  <li class="poePortStatusListItem">
    <span class="poe-port-index"><span>2</span></span>
    <span class="poe-power-mode"><span>Searching</span></span>
    <span class="poe-portPwr-width"><span>ml003@0@</span></span>
    <div class="poe_port_status"><span>Power:</span><span>0.00</span></div>
  </li>
</ul>
"""

GS316_STATUS = """
<div class="port-wrap"><span class="port-number">1 - Access Point</span></div>
<div class="port-wrap"><span class="port-number">16</span></div>
"""

POE_SETTINGS = """
<table>
  <tr><th>Port</th><th>Name</th><th>PoE</th><th>Mode</th></tr>
  <tr><td>1</td><td>Camera</td><td>enable</td><td>802.3at</td></tr>
</table>
"""

PORT_SETTINGS = """
<table>
  <tr><th>Port</th><th>Name</th><th>Speed</th></tr>
  <tr><td>1</td><td>Uplink</td><td>auto</td></tr>
  <tr><td>2</td><td>Printer</td><td>disable</td></tr>
</table>
"""

ADDRESS = "10.0.0.5"


def _response(text=""):
    resp = MagicMock(spec=requests.Response)
    resp.text = text
    resp.status_code = 200
    resp.headers = {}
    return resp


def _client(model, get_body="", post_body="<html>saved</html>"):
    store = MemoryTokenStore()
    store.store(ADDRESS, "tok", model)
    transport = MagicMock()
    transport.get.return_value = _response(get_body)
    transport.post.return_value = _response(post_body)
    return SwitchClient(ADDRESS, token_store=store, transport=transport), transport, store


class TestPoeManager(unittest.TestCase):
    def test_status_gs30x(self):
        client, transport, _ = _client(Model.GS305EP, GS30X_STATUS)

        statuses = client.poe.get_status()

        self.assertEqual([s.port_id for s in statuses], [1, 2])
        transport.get.assert_called_once_with("/getPoePortStatus.cgi", headers={"Cookie": "SID=tok"})

    def test_status_gs316(self):
        client, transport, _ = _client(Model.GS316EPP, GS316_STATUS)

        statuses = client.poe.get_status()

        self.assertEqual([s.port_id for s in statuses], [1, 16])
        transport.get.assert_called_once_with(
            "/iss/specific/poePortStatus.html?Gambit=tok", headers={}
        )

    def test_port_status_lookup(self):
        client, _, _ = _client(Model.GS305EP, GS30X_STATUS)
        self.assertEqual(client.poe.get_port_status(2).status, "Searching")

    def test_unknown_port(self):
        client, _, _ = _client(Model.GS305EP, GS30X_STATUS)
        with self.assertRaises(OperationError) as ctx:
            client.poe.get_port_status(9)
        self.assertIn("port 9 not found", str(ctx.exception))

    def test_settings(self):
        client, transport, _ = _client(Model.GS308EP, POE_SETTINGS)
        self.assertEqual(client.poe.get_port_settings(1).mode, "802.3at")
        transport.get.assert_called_once_with("/PoEPortConfig.cgi", headers={"Cookie": "SID=tok"})

    def test_update_posts_sparse_form(self):
        client, transport, _ = _client(Model.GS305EP)

        client.poe.update_port(PoeUpdate(3, enabled=True), PoeUpdate(4, mode=PoeMode.LEGACY))

        self.assertEqual(transport.post.call_count, 2)
        first, second = transport.post.call_args_list
        self.assertEqual(first.args[0], "/PoEPortConfig.cgi")
        self.assertEqual(first.kwargs["data"], {"port": "3", "enabled": "1"})
        self.assertEqual(second.kwargs["data"], {"port": "4", "mode": "legacy"})

    def test_update_gambit_carries_token_in_form(self):
        client, transport, _ = _client(Model.GS316EP)
        client.poe.disable_port(7)
        transport.post.assert_called_once_with(
            "/iss/specific/poePortConf.html",
            data={"port": "7", "enabled": "0", "Gambit": "tok"},
            headers={},
        )

    def test_invalid_update_sends_nothing(self):
        client, transport, _ = _client(Model.GS305EP)
        with self.assertRaises(OperationError):
            client.poe.update_port(PoeUpdate(1, enabled=True), PoeUpdate(2))
        transport.post.assert_not_called()

    def test_no_updates(self):
        client, _, _ = _client(Model.GS305EP)
        with self.assertRaises(OperationError):
            client.poe.update_port()

    def test_device_error_on_update(self):
        client, _, _ = _client(Model.GS305EP, post_body="<script>alert('Power budget exceeded')</script>")
        with self.assertRaises(OperationError) as ctx:
            client.poe.set_port_power_limit(1, "user", 30.0)
        self.assertIn("Power budget exceeded", str(ctx.exception))

    def test_cycle_power(self):
        client, transport, _ = _client(Model.GS305EP)
        client.poe.cycle_power(1, 2)
        sent = [call.kwargs["data"] for call in transport.post.call_args_list]
        self.assertEqual(sent, [
            {"port": "1", "action": "cycle"},
            {"port": "2", "action": "cycle"},
        ])

    def test_cycle_requires_ports(self):
        client, _, _ = _client(Model.GS305EP)
        with self.assertRaises(OperationError):
            client.poe.cycle_power()

    def test_expired_session(self):
        client, _, store = _client(Model.GS305EP, '<script>top.location="/login.cgi"</script>')

        with self.assertRaises(SessionExpired):
            client.poe.get_status()

        self.assertFalse(client.is_authenticated)
        with self.assertRaises(TokenNotFound):
            store.get(ADDRESS)


class TestUnauthenticatedManagers(unittest.TestCase):
    def setUp(self):
        self.transport = MagicMock()
        self.transport.get.return_value = _response("<title>GS305EP</title>")
        self.client = SwitchClient(ADDRESS, transport=self.transport)
        self.transport.reset_mock()

    def test_reads_rejected_without_network(self):
        for call in (self.client.poe.get_status, self.client.poe.get_settings, self.client.ports.get_settings):
            with self.assertRaises(NotAuthenticated):
                call()
        self.transport.get.assert_not_called()

    def test_writes_rejected_before_validation(self):
        with self.assertRaises(NotAuthenticated):
            self.client.poe.update_port()
        with self.assertRaises(NotAuthenticated):
            self.client.poe.cycle_power(1)
        with self.assertRaises(NotAuthenticated):
            self.client.ports.update_port(PortUpdate(1, name="x"))
        self.transport.post.assert_not_called()


class TestPortManager(unittest.TestCase):
    def test_settings(self):
        client, transport, _ = _client(Model.GS308EPP, PORT_SETTINGS)
        self.assertEqual(client.ports.get_port_settings(2).port_name, "Printer")
        transport.get.assert_called_once_with("/PortStatistics.cgi", headers={"Cookie": "SID=tok"})

    def test_gs316_endpoint(self):
        client, transport, _ = _client(Model.GS316EP, PORT_SETTINGS)
        client.ports.get_settings()
        transport.get.assert_called_once_with("/iss/specific/interface.html?Gambit=tok", headers={})

    def test_helpers_encode_forms(self):
        client, transport, _ = _client(Model.GS305EP)

        client.ports.set_port_name(1, "Uplink")
        client.ports.set_port_flow_control(1, False)
        client.ports.set_port_limits(1, "1 Mbps", "no limit")
        client.ports.disable_port(2)
        client.ports.enable_port(2)

        sent = [call.kwargs["data"] for call in transport.post.call_args_list]
        self.assertEqual(sent, [
            {"port": "1", "name": "Uplink"},
            {"port": "1", "flow_control": "off"},
            {"port": "1", "ingress_limit": "1 Mbps", "egress_limit": "no limit"},
            {"port": "2", "speed": PortSpeed.DISABLE.value},
            {"port": "2", "speed": PortSpeed.AUTO.value},
        ])
        self.assertEqual(transport.post.call_args.args[0], "/PortConfig.cgi")


if __name__ == "__main__":
    unittest.main()
