from .local_env import LocalEnvironment

__all__ = ["LocalEnvironment"]
