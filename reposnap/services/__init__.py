from .vcs import VcsClient, GitClient

__all__ = [
    "VcsClient",
    "GitClient",
]
