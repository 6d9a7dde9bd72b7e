"""Property-based tests for configuration management."""

import os
from unittest.mock import patch

from hypothesis import given
from hypothesis import strategies as st

from feed_builder.config import Config

env_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc")), min_size=1, max_size=80
)


class TestConfigProperties:
    """Property-based tests for Config class."""

    @given(st.integers(min_value=1, max_value=10**6))
    def test_description_budget_is_configurable(self, budget):
        """
        For any positive budget configured, Config exposes exactly that budget.
        """
        with patch.dict(os.environ, {"FEED_DESCRIPTION_CHARS": str(budget)}, clear=True):
            config = Config()

        assert config.description_chars == budget

    @given(env_text, env_text)
    def test_channel_text_is_configurable(self, title, description):
        """
        For any channel title and description, the channel carries them unchanged.
        """
        env = {"FEED_TITLE": title, "FEED_DESCRIPTION": description}
        with patch.dict(os.environ, env, clear=True):
            channel = Config().get_channel_config()

        assert channel.title == title
        assert channel.description == description
