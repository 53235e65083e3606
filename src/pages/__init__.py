"""CloudLock pages."""

from .login import LoginPage
from .register import RegisterPage
from .tutorial import TutorialDialog
from .vault import VaultPage

__all__ = [
    "LoginPage",
    "RegisterPage",
    "TutorialDialog",
    "VaultPage",
]
