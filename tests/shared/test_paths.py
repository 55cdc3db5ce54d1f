from os import environ
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase
from unittest.mock import patch

from snipcache.shared.paths import exists, expand, join, normalize, read_bytes


class Paths(TestCase):
    def test_1(self) -> None:
        self.assertEqual(join("/a/b", "../c.json"), normalize("/a/c.json"))
        self.assertTrue(join("a", "b").is_absolute())

    def test_2(self) -> None:
        with TemporaryDirectory() as tmp:
            self.assertIsNone(expand(Path(tmp) / "missing"))
            with patch.dict(environ, {"HOME": tmp, "SNIPCACHE_TEST_DIR": "x"}):
                (Path(tmp) / "x").mkdir()
                expanded = expand("~/$SNIPCACHE_TEST_DIR")
            self.assertEqual(expanded, Path(tmp, "x").resolve())

    def test_3(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "a.json"
            self.assertFalse(exists(path))
            self.assertIsNone(read_bytes(path))

            path.write_bytes(b"{}")
            self.assertTrue(exists(path))
            self.assertEqual(read_bytes(path), b"{}")
            self.assertIsNone(read_bytes(Path(tmp)))
