"""
Shared Config Module
====================

Configuration files read by ``serenemind.shared.core.configuration``.

Structure:
- settings/: YAML configuration files (defaults, project, user)
"""
