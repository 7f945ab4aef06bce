"""
Autofill Engine

Heuristic form population for browser UI tests. Given a set of form elements
and an optional seed, it decides a value for every control (text, select,
checkbox, radio group) and applies it:

- Simple seeds (numbers, strings, dates, enums) go into every text control
- Structured seeds (dicts, pydantic models, dataclasses, objects) are looked
  up per control by id, then name
- Anything the seed does not cover is filled with generated data
"""

from .automation import AutomationLayer, SelectOption
from .config import FillConfig
from .controls import Control, ControlKind
from .data_generator import FakerDataGenerator, RandomDataGenerator, StringKind
from .engine import FillSession, SessionState, auto_fill
from .errors import AutoFillError, ConfigError, UsageError
from .form_filler import FormFiller
from .lookup import AttributeLookup, SeedLookup
from .playwright_automation import PlaywrightAutomation
from .applicator import FillSummary
from .resolver import FillDecision, ValueSource
from .seed import SeedMode, classify_seed
from .submit import ThenSubmit

__all__ = [
    # Entry points
    "FormFiller",
    "auto_fill",
    "FillSession",
    "SessionState",
    "ThenSubmit",
    "FillSummary",
    # Collaborator contracts
    "AutomationLayer",
    "PlaywrightAutomation",
    "SelectOption",
    "SeedLookup",
    "AttributeLookup",
    "RandomDataGenerator",
    "FakerDataGenerator",
    "StringKind",
    # Model
    "Control",
    "ControlKind",
    "FillDecision",
    "ValueSource",
    "SeedMode",
    "classify_seed",
    "FillConfig",
    # Errors
    "AutoFillError",
    "UsageError",
    "ConfigError",
]

__version__ = "1.0.0"
