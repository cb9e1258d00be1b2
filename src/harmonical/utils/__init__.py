"""Utilities used by the Harmonical.

"""
