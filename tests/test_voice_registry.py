"""Unit tests for the voice registry."""

import pytest

from src.core.error_handling import NotFoundError, UpstreamError
from src.voice_synthesis.models import Voice
from src.voice_synthesis.voice_registry import VoiceRegistry

from fakes import FakeSynthesisClient


class TestVoiceRegistryRefresh:
    """Test refreshing the voice set."""

    def test_starts_empty_and_unselected(self, client):
        """A new registry has no voices and no selection."""
        registry = VoiceRegistry(client)

        snapshot = registry.list()

        assert snapshot.voices == []
        assert snapshot.selected is None
        assert registry.current() is None

    def test_refresh_selects_first_voice(self, client, voices):
        """The first fetched voice becomes the default selection."""
        registry = VoiceRegistry(client)

        snapshot = registry.refresh()

        assert snapshot.voices == voices
        assert snapshot.selected == voices[0]
        assert registry.current().voice_id == "V1"

    def test_refresh_with_no_voices_leaves_selection_unset(self):
        """An empty listing does not select anything."""
        registry = VoiceRegistry(FakeSynthesisClient([]))

        registry.refresh()

        assert registry.current() is None

    def test_refresh_keeps_explicit_selection(self, registry, client):
        """A refresh does not override a voice picked by the user."""
        registry.select("V2")

        registry.refresh()

        assert registry.current().voice_id == "V2"

    def test_refresh_replaces_voice_set_wholesale(self, registry, client):
        """Voices missing from the new listing disappear."""
        client.voices = [Voice(voice_id="V9", name="New", category="generated")]

        snapshot = registry.refresh()

        assert [v.voice_id for v in snapshot.voices] == ["V9"]
        with pytest.raises(NotFoundError):
            registry.select("V2")

    def test_refresh_re_resolves_selection_by_id(self, registry, client):
        """The selection points at the fresh record for the same id."""
        client.voices = [Voice(voice_id="V1", name="Rachel v2", category="premade")]

        registry.refresh()

        assert registry.current().name == "Rachel v2"

    def test_refresh_keeps_stale_selection_when_voice_vanishes(self, registry, client):
        """A selected voice that is no longer listed stays selected."""
        client.voices = [Voice(voice_id="V2", name="Adam", category="premade")]

        registry.refresh()

        assert registry.current().voice_id == "V1"

    def test_failed_refresh_leaves_state_untouched(self, registry, client, voices):
        """An upstream failure neither clears nor partially replaces state."""
        registry.select("V3")
        client.voices = []
        client.fail_listing = True

        with pytest.raises(UpstreamError):
            registry.refresh()

        snapshot = registry.list()
        assert snapshot.voices == voices
        assert snapshot.selected.voice_id == "V3"

    def test_list_does_not_refresh(self, registry, client):
        """Listing reads the cached voice set only."""
        calls = client.list_calls

        registry.list()
        registry.list()

        assert client.list_calls == calls

    def test_list_returns_a_copy(self, registry):
        """Mutating a snapshot does not affect the registry."""
        registry.list().voices.clear()

        assert len(registry.list().voices) == 3


class TestVoiceRegistrySelect:
    """Test voice selection."""

    def test_select_known_voice(self, registry, voices):
        """Selecting a listed id returns and activates that voice."""
        voice = registry.select("V2")

        assert voice == voices[1]
        assert registry.current() == voices[1]

    def test_select_unknown_voice(self, registry):
        """Unknown ids raise NotFoundError and keep the old selection."""
        with pytest.raises(NotFoundError) as exc_info:
            registry.select("nonexistent-id")

        assert exc_info.value.voice_id == "nonexistent-id"
        assert "nonexistent-id" in str(exc_info.value)
        assert registry.current().voice_id == "V1"

    def test_select_requires_exact_match(self, registry):
        """Lookup is case sensitive and does not trim."""
        with pytest.raises(NotFoundError):
            registry.select("v1")
        with pytest.raises(NotFoundError):
            registry.select(" V1")
