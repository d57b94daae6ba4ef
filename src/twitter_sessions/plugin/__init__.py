"""Host runtime plugin surface."""

from twitter_sessions.plugin.adapter import (
    PLUGIN_DESCRIPTION,
    TWITTER_CLIENT_NAME,
    Plugin,
    StopHandle,
    TwitterClientInterface,
    create_plugin,
)

__all__ = [
    "Plugin",
    "StopHandle",
    "TwitterClientInterface",
    "create_plugin",
    "TWITTER_CLIENT_NAME",
    "PLUGIN_DESCRIPTION",
]
