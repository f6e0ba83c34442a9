"""Command handlers invoked by the CLI"""

from .fix import FixCommand, FixReport, TemplateProcessor

__all__ = ["FixCommand", "FixReport", "TemplateProcessor"]
