class StatsBrowserError(Exception):
    """Base exception for all stats_browser errors"""
    pass

class ConfigError(StatsBrowserError):
    """Invalid or inconsistent settings file"""
    pass

class SampleImportError(StatsBrowserError):
    """
    Uploaded payload could not be decoded into text
    bad data URL, invalid base64, non UTF-8 bytes
    """
    pass
