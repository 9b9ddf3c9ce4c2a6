"""Localization and filtering engine."""
