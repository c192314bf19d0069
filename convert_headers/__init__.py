from ._version import __version__
from .core.translator import HeaderLineTranslator, translate


__all__ = ["__version__", "HeaderLineTranslator", "translate"]
