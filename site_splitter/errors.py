# site_splitter/errors.py
"""Exceptions raised while splitting or combining an export."""


class SiteSplitterError(Exception):
    """Base class for every error raised by this package."""


class ExportReadError(SiteSplitterError):
    """The aggregate export file is missing, unreadable or misshapen."""


class SiteFileError(SiteSplitterError):
    """A JSON file in the split directory could not be read or parsed."""


class SettingsFileError(SiteSplitterError):
    """userSettings.json is missing or invalid."""
