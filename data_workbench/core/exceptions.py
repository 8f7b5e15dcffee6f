

class WorkbenchError(Exception):
    """Base exception for all data_workbench errors"""
    pass

class ConfigError(WorkbenchError):
    """Invalid or inconsistent global.json or dataset config"""
    pass

class MissingContextError(WorkbenchError, RuntimeError):
    """
    Exploration state was read with no ExplorationContext mounted.
    This is a programming error, callers should not recover from it.
    """
    pass
