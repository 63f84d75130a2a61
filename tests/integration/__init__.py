"""
Integration test package.

Tests here run the harness plugin inside a real pytest session (via
pytester) and exercise the demo site through the Flask test client.
"""
