from __future__ import annotations

import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from dblayout.util.paths import FilesystemResolutionError, canonicalize


class CanonicalizeTests(unittest.TestCase):
    def test_relative_path_is_made_absolute(self) -> None:
        result = canonicalize("some/../relative")

        self.assertTrue(result.is_absolute())
        self.assertEqual(result, Path.cwd().resolve() / "relative")

    def test_dot_segments_are_removed(self) -> None:
        with TemporaryDirectory() as tmpdir:
            base = Path(tmpdir).resolve()
            (base / "a").mkdir()

            self.assertEqual(canonicalize(base / "a" / ".." / "b" / "." / "c"), base / "b" / "c")

    def test_symlink_and_direct_path_agree(self) -> None:
        with TemporaryDirectory() as tmpdir:
            base = Path(tmpdir).resolve()
            target = base / "target"
            target.mkdir()
            link = base / "link"
            os.symlink(target, link, target_is_directory=True)

            self.assertEqual(canonicalize(link), canonicalize(target))
            self.assertEqual(canonicalize(str(link)), target)

    def test_missing_leaf_with_existing_parent(self) -> None:
        with TemporaryDirectory() as tmpdir:
            base = Path(tmpdir).resolve()

            self.assertEqual(canonicalize(base / "not-yet"), base / "not-yet")
            self.assertFalse((base / "not-yet").exists())

    def test_missing_parent_chain_is_normalised_lexically(self) -> None:
        with TemporaryDirectory() as tmpdir:
            base = Path(tmpdir).resolve()

            result = canonicalize(base / "x" / "y" / ".." / "z")

        self.assertEqual(result, base / "x" / "z")

    def test_home_tilde_is_expanded(self) -> None:
        with TemporaryDirectory() as tmpdir:
            with patch.dict(os.environ, {"HOME": tmpdir}):
                result = canonicalize("~/store")

        self.assertEqual(result, Path(tmpdir).resolve() / "store")

    def test_none_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            canonicalize(None)  # type: ignore[arg-type]

    def test_filesystem_failure_is_wrapped(self) -> None:
        failure = PermissionError(13, "Permission denied")
        with patch.object(Path, "resolve", side_effect=failure):
            with self.assertRaises(FilesystemResolutionError) as ctx:
                canonicalize("/restricted/home")

        self.assertIs(ctx.exception.__cause__, failure)
        self.assertEqual(ctx.exception.path, Path("/restricted/home"))
        self.assertIn("/restricted/home", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
