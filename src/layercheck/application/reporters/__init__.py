"""Reporters for layering check results.

PlainTextReporter and JsonReporter use stdlib only.
ConsoleReporter renders rich tables.
"""

from layercheck.application.reporters._base import BaseReporter
from layercheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from layercheck.application.reporters.json_reporter import JsonReporter
from layercheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "JsonReporter",
    "ConsoleReporter",
    "ConsoleConfig",
]
