"""Unit tests for harmonical.utils modules

"""
