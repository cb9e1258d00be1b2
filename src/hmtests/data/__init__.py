"""Unit tests for harmonical.data modules

"""
