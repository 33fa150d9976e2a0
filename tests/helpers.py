"""Hook implementations used across the test suite."""

from cache_options.hooks.base import CacheHook


class AuditHook(CacheHook):
    """Test hook recording every notification."""

    def __init__(self, **server_args):
        super().__init__(**server_args)
        self.notifications = []

    def handle_notify(self, action, result=None):
        self.notifications.append((action, result))


class GuardHook(AuditHook):
    """Second test hook, used as a pre hook."""
