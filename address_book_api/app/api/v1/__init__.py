"""
Version 1 of the API.

This subpackage bundles the contact endpoints.  Breaking changes
should be introduced in a new version subpackage.
"""
