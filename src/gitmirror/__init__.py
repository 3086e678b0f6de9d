"""
git-mirror - mirror a Git repository, its branches and tags to another remote.
"""

__version__ = "1.0.0"
