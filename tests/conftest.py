from jsonaccess.testing import debug_diagnostics

__all__ = ["debug_diagnostics"]
