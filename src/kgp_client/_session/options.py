# Area: Session
"""
kgp_client._session.options — Option registry
=============================================

Key/value store behind the protocol's ``set``/``get`` exchange.

Keys are namespaced with a colon: ``info:``, ``time:`` and ``auth:`` are
read by the engine, ``custom:`` is left to applications. The registry
does not enforce either; reads never block and never fail, writes are
last-write-wins and keep no history.
"""

from __future__ import annotations
from typing import Dict, Optional, Union


class OptionRegistry:
    """Last-write-wins option table."""

    def __init__(self):
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: Union[str, int]) -> None:
        self._values[key] = str(value)
