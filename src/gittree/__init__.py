from __future__ import annotations

"""
gittree: nested file trees from flat git tree listings.
"""

__version__ = "1.0.0"
