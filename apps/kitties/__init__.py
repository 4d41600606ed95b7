"""Kitties app package.

The kitty registry: definitions of group-savings purses, each identified by
a unique address that contributions are recorded against.
"""
