"""
Serenemind Shared Kernel
========================

Business logic and infrastructure used by the Flet tracker app.

Architecture:
- core: EventBus, configuration
- infrastructure: local key-value storage
- domain: anger records, breathing cycle
"""

__version__ = "0.1.0"

__all__ = []
