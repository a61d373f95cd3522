"""Packaged rule tables for HighlightKit"""
