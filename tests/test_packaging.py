import importlib
import importlib.util
import tomllib
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def load_pyproject():
    with open(ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)


class PackagingTests(unittest.TestCase):
    def test_package_discovery_includes_namespace_root(self):
        find = load_pyproject()["tool"]["setuptools"]["packages"]["find"]
        self.assertTrue(find["namespaces"])
        self.assertIn("src*", find["include"])

    @unittest.skipUnless(importlib.util.find_spec("setuptools"), "setuptools not installed")
    def test_discovered_packages_cover_every_subpackage(self):
        from setuptools import find_namespace_packages

        find = load_pyproject()["tool"]["setuptools"]["packages"]["find"]
        packages = set(find_namespace_packages(where=str(ROOT), include=find["include"]))
        for name in (
            "src.second_brain",
            "src.second_brain.core",
            "src.second_brain.normalizer",
            "src.second_brain.presentation",
            "src.second_brain.transport",
        ):
            with self.subTest(package=name):
                self.assertIn(name, packages)

    def test_console_script_target_resolves(self):
        target = load_pyproject()["project"]["scripts"]["second-brain"]
        module_name, _, attr = target.partition(":")
        module = importlib.import_module(module_name)
        self.assertTrue(callable(getattr(module, attr)))


if __name__ == "__main__":
    unittest.main()
