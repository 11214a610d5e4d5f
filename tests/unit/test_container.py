"""Tests for the process container"""

import threading

import pytest

from patternkit.core.config import Config
from patternkit.shared.container import DIContainer, create_container
from patternkit.singleton.guard import SingletonGuard
from patternkit.strategies.routing import StrategyRouter


class Service:
    pass


class TestDIContainer:
    def test_config_registered_as_singleton(self):
        config = Config()
        container = DIContainer(config)

        assert container.get(Config) is config

    def test_factory_runs_once(self):
        container = DIContainer()
        calls = []

        def factory(c: DIContainer) -> Service:
            calls.append(c)
            return Service()

        registered = container.register_factory(factory)

        assert registered is Service
        assert container.get(Service) is container.get(Service)
        assert calls == [container]

    def test_factory_runs_once_under_concurrency(self):
        container = DIContainer()
        calls = []
        barrier = threading.Barrier(50)

        def factory(c: DIContainer) -> Service:
            calls.append(1)
            return Service()

        container.register_factory(factory)
        results = []

        def resolve():
            barrier.wait()
            results.append(container.get(Service))

        threads = [threading.Thread(target=resolve) for _ in range(50)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert all(result is results[0] for result in results)

    def test_unknown_dependency_raises(self):
        with pytest.raises(ValueError, match="Cannot resolve dependency: Service"):
            DIContainer().get(Service)


class TestCreateContainer:
    def test_wires_guard_with_configured_log_file(self, tmp_path):
        config = Config(log_file=str(tmp_path / "app.log"))
        container = create_container(config)

        guard = container.get(SingletonGuard)

        assert guard.log_file == tmp_path / "app.log"
        assert container.get(SingletonGuard) is guard
        assert guard.is_initialized is False

    def test_wires_default_router(self):
        container = create_container(Config())

        router = container.get(StrategyRouter)

        assert router.evaluate([1, 9, 4], "sorting") == 9
        assert container.get(StrategyRouter) is router

    def test_loads_config_from_env_when_omitted(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PATTERNKIT_LOG_FILE", str(tmp_path / "env.log"))

        container = create_container()

        assert container.get(Config).log_file == str(tmp_path / "env.log")
