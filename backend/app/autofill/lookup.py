"""
Structured Seed Lookup

Pulls a field value out of a structured seed by key. The engine only relies
on the SeedLookup contract; AttributeLookup is the default used when nothing
else is configured.
"""

import dataclasses
import re
from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel


def normalize_key(key: str) -> str:
    """Field keys compare equal ignoring case, spaces, dashes and underscores"""
    return re.sub(r"[\s_\-]", "", key).lower()


class SeedLookup:
    """Contract: return the seed's value for a key, or None when it has none"""

    def lookup(self, seed: Any, scope_hint: Optional[str], key: str) -> Any:
        raise NotImplementedError


class AttributeLookup(SeedLookup):
    """
    Reads values from mappings, pydantic models, dataclasses and plain objects.

    Matching order for a key like "first-name":
    1. exact key
    2. case-insensitive key
    3. normalized key ("First_Name", "firstname", ...)
    """

    def lookup(self, seed: Any, scope_hint: Optional[str], key: str) -> Any:
        if seed is None or not key:
            return None

        fields = self._fields_of(seed)
        if key in fields:
            return fields[key]

        key_lower = key.lower()
        for name, value in fields.items():
            if name.lower() == key_lower:
                return value

        key_normalized = normalize_key(key)
        for name, value in fields.items():
            if normalize_key(name) == key_normalized:
                return value

        return None

    def _fields_of(self, seed: Any) -> Dict[str, Any]:
        if isinstance(seed, Mapping):
            return {str(k): v for k, v in seed.items()}
        if isinstance(seed, BaseModel):
            return {name: getattr(seed, name) for name in type(seed).model_fields}
        if dataclasses.is_dataclass(seed) and not isinstance(seed, type):
            return {f.name: getattr(seed, f.name) for f in dataclasses.fields(seed)}
        if hasattr(seed, "__dict__"):
            return {k: v for k, v in vars(seed).items() if not k.startswith("_")}
        return {}
