"""Tests for the caching credentials provider."""

from jenkins_secretsmanager.config import PluginConfiguration
from jenkins_secretsmanager.credentials import StringCredentials, UsernamePasswordCredentials
from jenkins_secretsmanager.provider import CACHE_DURATION_SECONDS, CredentialsProvider


class FakeSupplier:
    """Supplier returning prepared batches and counting calls."""

    def __init__(self, *batches):
        self.batches = list(batches)
        self.calls = 0

    def get(self):
        batch = self.batches[min(self.calls, len(self.batches) - 1)]
        self.calls += 1
        return list(batch)


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def string(id):
    return StringCredentials(id, "", None)


def configuration(cache=True):
    config = PluginConfiguration(cache=cache)
    return lambda: config


class TestCredentialsProvider:
    """Tests for CredentialsProvider."""

    def test_caches_within_duration(self):
        """Lookups within the cache window should not re-fetch."""
        # Arrange
        supplier = FakeSupplier([string("a")], [string("b")])
        clock = FakeClock()
        provider = CredentialsProvider(supplier, configuration_source=configuration(), clock=clock)

        # Act
        first = provider.list_ids()
        clock.now += CACHE_DURATION_SECONDS - 1
        second = provider.list_ids()

        # Assert
        assert first == second == ["a"]
        assert supplier.calls == 1

    def test_refreshes_after_expiry(self):
        """Once the window passes the supplier is called again."""
        # Arrange
        supplier = FakeSupplier([string("a")], [string("b")])
        clock = FakeClock()
        provider = CredentialsProvider(supplier, configuration_source=configuration(), clock=clock)

        # Act
        provider.list_ids()
        clock.now += CACHE_DURATION_SECONDS
        result = provider.list_ids()

        # Assert
        assert result == ["b"]
        assert supplier.calls == 2

    def test_cache_disabled(self):
        """With cache off, every lookup re-fetches."""
        # Arrange
        supplier = FakeSupplier([string("a")], [string("b")])
        provider = CredentialsProvider(supplier, configuration_source=configuration(cache=False))

        # Act
        first = provider.list_ids()
        second = provider.list_ids()

        # Assert
        assert first == ["a"]
        assert second == ["b"]
        assert supplier.calls == 2

    def test_reenabling_cache_refetches(self):
        """Turning the cache off and on again must not serve the list cached before."""
        # Arrange
        config = PluginConfiguration(cache=True)
        supplier = FakeSupplier([string("a")], [string("b")], [string("c")])
        provider = CredentialsProvider(supplier, configuration_source=lambda: config, clock=FakeClock())
        provider.list_ids()

        # Act
        config.cache = False
        uncached = provider.list_ids()
        config.cache = True
        recached = provider.list_ids()

        # Assert
        assert uncached == ["b"]
        assert recached == ["c"]
        assert supplier.calls == 3

    def test_invalidate(self):
        # Arrange
        supplier = FakeSupplier([string("a")], [string("b")])
        provider = CredentialsProvider(supplier, configuration_source=configuration(), clock=FakeClock())
        provider.list_ids()

        # Act
        provider.invalidate()

        # Assert
        assert provider.list_ids() == ["b"]

    def test_filter_by_type(self):
        """get_credentials(type) returns only instances of that type."""
        # Arrange
        credentials = [string("a"), UsernamePasswordCredentials("b", "", "joe", None)]
        provider = CredentialsProvider(FakeSupplier(credentials), configuration_source=configuration())

        # Act
        result = provider.get_credentials(UsernamePasswordCredentials)

        # Assert
        assert [c.id for c in result] == ["b"]
        assert len(provider.get_credentials()) == 2

    def test_get_credential_by_id(self):
        # Arrange
        provider = CredentialsProvider(FakeSupplier([string("a"), string("b")]),
                                       configuration_source=configuration())

        # Act & Assert
        assert provider.get_credential("b").id == "b"
        assert provider.get_credential("missing") is None

    def test_cached_list_is_a_copy(self):
        """Callers mutating the result must not change the cache."""
        # Arrange
        provider = CredentialsProvider(FakeSupplier([string("a")]), configuration_source=configuration(),
                                       clock=FakeClock())

        # Act
        provider.get_credentials().clear()

        # Assert
        assert provider.list_ids() == ["a"]
