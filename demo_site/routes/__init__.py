"""
Routes package for the demo site.

This package contains route blueprints:
- views: HTML pages for the login and dynamic loading examples
"""
