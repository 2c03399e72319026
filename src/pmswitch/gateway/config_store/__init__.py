"""Persisted configuration operations."""

from pmswitch.gateway.config_store.abc import ConfigStore as ConfigStore
from pmswitch.gateway.config_store.fake import FakeConfigStore as FakeConfigStore
from pmswitch.gateway.config_store.real import RealConfigStore as RealConfigStore
