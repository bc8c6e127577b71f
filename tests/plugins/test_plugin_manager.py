"""Tests for PluginManager — registration, local discovery, and hook relay."""

from __future__ import annotations

from pathlib import Path

from bookstore.plugins.hookspecs import hookimpl
from bookstore.plugins.manager import PluginManager
from bookstore.services.registry import Registry


class _DummyPlugin:
    @hookimpl
    def post_subscribe(self, user_name: str) -> None:
        pass


class _NotAPlugin:
    def post_subscribe(self, user_name: str) -> None:
        pass


_LOCAL_PLUGIN = '''
from pathlib import Path

from bookstore.plugins.hookspecs import hookimpl


class PriceLog:
    @hookimpl
    def post_price_update(self, title, price, notified):
        log = Path(__file__).with_name("prices.log")
        with log.open("a", encoding="utf-8") as fh:
            fh.write(f"{title}={price}:{','.join(notified)}\\n")
'''


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        for name in (
            "post_create_book",
            "post_create_user",
            "post_subscribe",
            "post_unsubscribe",
            "post_price_update",
            "post_read",
            "post_listen",
        ):
            assert hasattr(pm.hook, name)

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert "_DummyPlugin" in pm.list_plugin_names()

    def test_has_hook_impls(self) -> None:
        assert PluginManager._has_hook_impls(_DummyPlugin)
        assert not PluginManager._has_hook_impls(_NotAPlugin)


class TestLocalDiscovery:
    def test_missing_dir_is_fine(self, tmp_path: Path) -> None:
        pm = PluginManager()
        assert pm.discover_and_load(local_dir=tmp_path / "nope") == []

    def test_loads_local_plugin(self, tmp_path: Path) -> None:
        (tmp_path / "price_log.py").write_text(_LOCAL_PLUGIN, encoding="utf-8")
        (tmp_path / "_private.py").write_text("raise RuntimeError('skipped')\n", encoding="utf-8")
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)
        assert "bookstore_local_plugin_price_log.PriceLog" in names

    def test_broken_plugin_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text("raise RuntimeError('boom')\n", encoding="utf-8")
        (tmp_path / "price_log.py").write_text(_LOCAL_PLUGIN, encoding="utf-8")
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)
        assert "bookstore_local_plugin_price_log.PriceLog" in names
        assert not any("broken" in name for name in names)

    def test_registry_wires_local_plugin(self, tmp_path: Path) -> None:
        (tmp_path / "price_log.py").write_text(_LOCAL_PLUGIN, encoding="utf-8")
        registry = Registry()
        registry.init_event_bus(local_dir=tmp_path)
        assert registry.event_bus is not None

        from bookstore.services.facade import BookstoreFacade

        facade = BookstoreFacade(registry)
        facade.create_book("Dune", "Herbert", "20")
        facade.create_user("alice", "standard")
        facade.subscribe("alice")
        facade.update_price("Dune", "25")
        assert (tmp_path / "prices.log").read_text(encoding="utf-8") == "Dune=25:alice\n"
