"""User facing interfaces for confusion metric computation."""

from .base import BaseInterface
from .cli import CLIInterface

__all__ = ["BaseInterface", "CLIInterface"]
