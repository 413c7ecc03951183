
class PokeBrowserError(Exception):
    """Base exception for all poke_browser errors"""
    pass

class ConfigError(PokeBrowserError):
    """Invalid or inconsistent global.json config"""
    pass

class DatasetSchemaError(PokeBrowserError):
    """
    CSV schema doesn't match what the dataset loader expects
    missing Name/Type_1 columns, unreadable source, etc
    """
    pass
