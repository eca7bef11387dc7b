"""Authentication use cases."""

from .begin_login import BeginLoginUseCase
from .complete_login import CompleteLoginUseCase

__all__ = ["BeginLoginUseCase", "CompleteLoginUseCase"]
