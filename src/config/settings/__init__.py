"""Agregador de settings do heating-sms-bridge.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Data store settings
from config.settings.datastore import (
    DEFAULT_POCKETBASE_URL,
    DataStoreBackend,
    DataStoreSettings,
    get_datastore_settings,
)

# Server settings
from config.settings.server import (
    DEFAULT_PORT,
    ServerSettings,
    get_server_settings,
)

# Channel-specific settings
from config.settings.sms import (
    SMS_RECEIVED_EVENT,
    SmsWebhookSettings,
    WebhookVariant,
    get_sms_settings,
)

__all__ = [
    # Constants
    "DEFAULT_POCKETBASE_URL",
    "DEFAULT_PORT",
    "SMS_RECEIVED_EVENT",
    # Base
    "BaseSettings",
    # Data store
    "DataStoreBackend",
    "DataStoreSettings",
    "Environment",
    # Server
    "ServerSettings",
    # Channels
    "SmsWebhookSettings",
    "WebhookVariant",
    "get_base_settings",
    "get_datastore_settings",
    "get_server_settings",
    "get_sms_settings",
]
