from . import binairo
from .binairo import *  # noqa: F401,F403

__all__ = ["binairo"] + binairo.__all__
