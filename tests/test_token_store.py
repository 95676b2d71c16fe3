"""
Tests for token persistence – in-memory and file-backed stores.
"""

import os
import stat
import tempfile
import threading
import unittest
from pathlib import Path
from unittest.mock import patch

from netgear_console.errors import (
    CorruptTokenError,
    ModelError,
    StaleTokenError,
    TokenNotFound,
    TokenStoreError,
)
from netgear_console.models import Model
from netgear_console.storage.tokens import FileTokenStore, MemoryTokenStore, fnv1a_32


class TestFnv1a(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(fnv1a_32(b""), 0x811C9DC5)
        self.assertEqual(fnv1a_32(b"a"), 3826002220)
        self.assertEqual(fnv1a_32(b"foobar"), 3214735720)
        self.assertEqual(fnv1a_32(b"192.168.1.1"), 2103183524)

    def test_distinct_addresses_distinct_hashes(self):
        self.assertNotEqual(fnv1a_32(b"10.0.0.5"), fnv1a_32(b"10.0.0.6"))


class TestMemoryTokenStore(unittest.TestCase):
    def setUp(self):
        self.store = MemoryTokenStore()

    def test_round_trip(self):
        self.store.store("10.0.0.5", "abc", Model.GS316EP)
        self.assertEqual(self.store.get("10.0.0.5"), ("abc", Model.GS316EP))

    def test_missing(self):
        with self.assertRaises(TokenNotFound):
            self.store.get("10.0.0.5")

    def test_delete_is_idempotent(self):
        self.store.store("10.0.0.5", "abc", Model.GS305EP)
        self.store.delete("10.0.0.5")
        self.store.delete("10.0.0.5")
        with self.assertRaises(TokenNotFound):
            self.store.get("10.0.0.5")

    def test_concurrent_writers(self):
        def writer(n):
            for i in range(50):
                self.store.store(f"host-{n}", f"tok-{i}", Model.GS308EP)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        for n in range(8):
            self.assertEqual(self.store.get(f"host-{n}"), ("tok-49", Model.GS308EP))


class TestFileTokenStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.store = FileTokenStore(self.root)

    def tearDown(self):
        self._tmp.cleanup()

    def _write_raw(self, address, content):
        path = self.store.token_path(address)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def test_token_path_layout(self):
        path = self.store.token_path("192.168.1.1")
        self.assertEqual(
            path, self.root / ".config" / "netgear-console" / "token-2103183524"
        )

    def test_default_root_is_temp_dir(self):
        store = FileTokenStore()
        self.assertEqual(store.root, Path(tempfile.gettempdir()))

    def test_round_trip_and_file_format(self):
        self.store.store("10.0.0.5", "abc123", Model.GS305EP)

        self.assertEqual(self.store.get("10.0.0.5"), ("abc123", Model.GS305EP))
        self.assertEqual(self.store.token_path("10.0.0.5").read_text(), "GS305EP:abc123")

    def test_file_is_owner_only(self):
        self.store.store("10.0.0.5", "abc123", Model.GS316EPP)
        mode = stat.S_IMODE(os.stat(self.store.token_path("10.0.0.5")).st_mode)
        self.assertEqual(mode, 0o600)

    def test_overwrite_leaves_no_temp_files(self):
        self.store.store("10.0.0.5", "first", Model.GS305EP)
        self.store.store("10.0.0.5", "second", Model.GS305EP)
        self.assertEqual(self.store.get("10.0.0.5")[0], "second")
        self.assertEqual(
            sorted(p.name for p in self.store.token_dir.iterdir()),
            [self.store.token_path("10.0.0.5").name],
        )

    def test_reads_handwritten_file(self):
        self._write_raw("test-host", "GS305EP:abc123")
        self.assertEqual(self.store.get("test-host"), ("abc123", Model.GS305EP))

    def test_extra_segments_ignored(self):
        self._write_raw("test-host", "GS305EP:token123:extra:data")
        self.assertEqual(self.store.get("test-host"), ("token123", Model.GS305EP))

    def test_trailing_newline_tolerated(self):
        self._write_raw("test-host", "GS316EP:tok\n")
        self.assertEqual(self.store.get("test-host"), ("tok", Model.GS316EP))

    def test_missing_file(self):
        with self.assertRaises(TokenNotFound):
            self.store.get("10.0.0.5")

    def test_empty_file_is_stale(self):
        self._write_raw("test-host", "")
        with self.assertRaises(StaleTokenError) as ctx:
            self.store.get("test-host")
        self.assertIn("log in again", str(ctx.exception))

    def test_missing_separator_is_corrupt(self):
        self._write_raw("test-host", "justatoken")
        with self.assertRaises(CorruptTokenError):
            self.store.get("test-host")

    def test_empty_token_is_corrupt(self):
        self._write_raw("test-host", "GS305EP:")
        with self.assertRaises(CorruptTokenError):
            self.store.get("test-host")

    def test_unknown_model_is_model_error(self):
        self._write_raw("test-host", "XS999:abc")
        with self.assertRaises(ModelError) as ctx:
            self.store.get("test-host")
        self.assertIn("XS999", str(ctx.exception))

    def test_corrupt_errors_are_token_store_errors(self):
        self._write_raw("test-host", "")
        with self.assertRaises(TokenStoreError):
            self.store.get("test-host")

    def test_delete_twice(self):
        self.store.store("10.0.0.5", "abc", Model.GS305EP)
        self.store.delete("10.0.0.5")
        self.store.delete("10.0.0.5")
        with self.assertRaises(TokenNotFound):
            self.store.get("10.0.0.5")

    def test_addresses_do_not_collide(self):
        self.store.store("10.0.0.5", "a", Model.GS305EP)
        self.store.store("10.0.0.6", "b", Model.GS316EP)
        self.assertEqual(self.store.get("10.0.0.5"), ("a", Model.GS305EP))
        self.assertEqual(self.store.get("10.0.0.6"), ("b", Model.GS316EP))

    def test_write_failure_cleans_up_and_raises(self):
        with patch("netgear_console.storage.tokens.os.replace", side_effect=OSError("disk full")):
            with self.assertRaises(TokenStoreError):
                self.store.store("10.0.0.5", "abc", Model.GS305EP)
        self.assertEqual(list(self.store.token_dir.iterdir()), [])


if __name__ == "__main__":
    unittest.main()
